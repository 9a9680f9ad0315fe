# sevenboard

Rules and state for a fast multiplayer game of *sevens*, also called
*fan tan*. The board is 4 × 13. Play has no turns. A player places a card
from their hand next to a card of the same suit that is already on the
board. The board wraps around, so 1 and 13 count as neighbours. Each
placement starts a short cool-down. During the game the server draws random
events that change the rules for a while.

The package holds the game logic and nothing else. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `sevenboard.cards`

This module defines the shared constants: deck size, scoring, cool time and
board geometry.

- `Suit` is an enum of the four suits.
- `Area` is an enum of where a card can be: `INVALID`, `BOARD`, and `PLAYER1` to `PLAYER4`. `Area.for_player(i)` returns the hand area for player `i`, counting from 0.
- `Card` is a dataclass. Cards compare by identity.
  - `code` is the card's wire code, `suit * 13 + number - 1`.
  - `frame_id` is the card's frame in the shared model.
  - `board_column()` and `board_position()` give where the card sits on the board for a given left-edge number.
  - `area_change()` moves the card to a new area. A card moved onto the board takes its board position and scale.
  - `slide()` realigns a card that is on the board after the left edge has moved.
- `card_from_code()` builds the card for a wire code.
- `make_deck()` returns all 52 cards in suit-then-number order.

### `sevenboard.protocol`

This module holds the datagram formats:

- a 15-byte client update: one placed card and the sender's score;
- a 250-byte game-state broadcast: four scores and all 52 cards;
- a 3-byte event notice.

Each format has `encode_*` and `decode_*` functions:
`encode_client_update` / `decode_client_update`,
`encode_game_data` / `decode_game_data`, and
`encode_event` / `decode_event`. They use the `CardData` and `EventData`
types and the `Event` and `SendDataType` enums. A malformed packet raises
`ValueError`.

`UdpLink` sends these packets over UDP with three methods: `send_to_server`,
`send_to_clients` and `send_event`. It can be used as a context manager.

### `sevenboard.mouse`

- `InputState` is the button cycle: Waiting → Started → Performed → Canceled.
- `ButtonTracker` runs that cycle for one button.
- `Mouse` tracks the position and both buttons once per frame. `is_left_clicked()` and `is_right_clicked()` report a fresh press. A disabled mouse reports position `(-1, -1)`.

### `sevenboard.board`

`Board` has these methods:

- `deal` shuffles and hands out the cards.
- `collect_hands` rebuilds the hand lists.
- `place_sevens` puts every seven still in a hand onto the board.
- `sort_hand` orders a hand by number, then suit.
- `can_place` checks whether a card may go on the board. A card is playable if it is next to a placed card and inside any area limit.
- `place_card` puts the card on the board. A player who empties their hand gets a rank bonus.
- `calculate_score`, `is_complete_row_of_suit`, `is_complete_column_at` and `add_score` handle scoring.

The board events are also `Board` methods:

- `fever_time` halves the cool time.
- `lucky_number` sets a bonus number.
- `limit_area` restricts which numbers may be placed.
- `move_area` shifts the board's left edge.
- `shuffle_hands` moves every hand to another player, so nobody keeps their own.
- `draw_event` draws one of the events above at random.
- `init_event_members` clears the effects the events leave behind.

On the server the events draw their own values and report them through the
`on_event` callback. On a client they apply the values they are given.

The module also has `is_derangement()`.

### `sevenboard.dice`

`Dice` is the event die:

- `roll` starts a spin towards a random target.
- `finish` turns the die to the face of the result.
- `reset` hides the die.

`rotation_for_result()` gives the rotation for each face, 1 to 6.

### `sevenboard.cursor`

`Cursor` is a box. Each `step()` moves it 30% of the way towards its target
position and size, and returns the rectangle to draw that frame.

### `sevenboard.fade`

`Fader` runs a screen fade frame by frame:

- `fade_in()` starts the fade-in. It can schedule an automatic fade-out.
- `fade_out()` starts the fade-out.
- `step()` advances one frame and returns the alpha to draw.

### `sevenboard.results`

- `rank_players()` orders the player indices by score, highest first.
- `result_lines()` builds the text lines for the result screen.

### `sevenboard.scenes`

- `SceneTag` names the scenes.
- `SceneLoadState` is the state of a background load.
- `Scene` is a base class whose hooks record the scene's lifecycle.
- `SceneManager` runs the current scene. Register a factory per tag with `register()`. It switches scenes at once with `change_sync()`, or builds the next scene on a thread with `change_async()`.

### `sevenboard.game`

`GameSession` keeps one player's `Board` in step with the network:

- `apply_init_data` applies the first deal.
- `apply_game_data` applies a server broadcast.
- `apply_client_update` applies a card a client placed.
- `apply_event` applies an event notice and rolls the event die.
- `try_place` places this player's card if the rules and the cool-down allow it, then sends it through the `UdpLink`, if there is one.
- `cool_time_remaining` reports how long the cool-down still runs.

## Example

```python
from sevenboard.board import Board
from sevenboard.cards import Area

board = Board(player_id=0)          # a server board deals on creation
board.place_sevens()
hand = [c for c in board.cards if c.area == Area.PLAYER1]
playable = [c for c in hand if board.can_place(c)]
```

## What the package does not do

- **No drawing, sound, window or input.** Positions, alphas and rectangles are computed, but nothing is drawn. The host program must read the mouse and feed the readings to `Mouse.update`.
- **No receiving, listening or main loop.** `UdpLink` only sends. The host program must receive datagrams and pass them to the `GameSession.apply_*` methods.
- **No connection setup and no time synchronisation.**
- **No title screen or menu scenes.** `SceneManager` runs whatever `Scene` subclasses the host program registers.
- **No command to start a game.**