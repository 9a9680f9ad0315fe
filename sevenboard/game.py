"""One player's game session: applies network packets and local card placements to a board."""

from __future__ import annotations

import random

from sevenboard.board import Board
from sevenboard.cards import DECK_RANGE, MAX_PLAYER, Area, Card, Suit
from sevenboard.dice import Dice
from sevenboard.protocol import (
    Event,
    EventData,
    UdpLink,
    decode_client_update,
    decode_event,
    decode_game_data,
)

# Face the event dice shows for each board event.
_EVENT_DICE = {
    Event.FEVER: 0,
    Event.LUCKY_NUMBER: 1,
    Event.LIMIT_AREA: 2,
    Event.MOVE_AREA: 3,
    Event.SHUFFLE_HAND: 4,
}


class GameSession:
    """Keeps a board in step with the other players and places this player's cards."""

    def __init__(
        self,
        board: Board,
        *,
        link: UdpLink | None = None,
        dice: Dice | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.board = board
        self.link = link
        self.dice = dice if dice is not None else Dice()
        self.rng = rng if rng is not None else random.Random()
        self.last_placed_time = 0
        self.is_game = board.is_server
        self.init_received = False
        if link is not None:
            board.on_event = link.send_event

    @property
    def is_server(self) -> bool:
        return self.board.is_server

    def _hand_index(self, card: Card) -> int | None:
        index = int(card.area) - int(Area.PLAYER1)
        if 0 <= index < len(self.board.hands):
            return index
        return None

    def _put_on_board(self, card: Card) -> None:
        index = self._hand_index(card)
        if index is not None:
            self.board.place_card(card, index)
        else:
            card.area_change(Area.BOARD, self.board.left_edge_num)
            self.board.board_data[int(card.suit)][card.number - 1] = True

    # ---------------------------------------------------------------- receiving

    def apply_init_data(self, data: bytes) -> bool:
        """Take over the first deal sent by the server; False once it was already taken."""
        if self.init_received:
            return False
        game = decode_game_data(data)
        for card, wire in zip(self.board.cards, game.cards):
            card.suit = Suit(wire.suit)
            card.number = wire.number
            card.area = Area(wire.area)
            card.area_number = wire.area_number
        self.board.collect_hands(MAX_PLAYER)
        if self.board.player_id < len(self.board.hands):
            self.board.sort_hand(self.board.player_id)
        self.init_received = True
        self.is_game = True
        return True

    def apply_game_data(self, data: bytes) -> list[Card]:
        """Apply a board broadcast from the server; return the cards newly put on the board."""
        game = decode_game_data(data)
        self.board.scores = list(game.scores)
        placed = []
        for card, wire in zip(self.board.cards, game.cards):
            if wire.area == Area.BOARD and card.area != Area.BOARD:
                self._put_on_board(card)
                placed.append(card)
        return placed

    def apply_client_update(self, player_index: int, data: bytes) -> Card | None:
        """Apply the card a client placed; return the card moved onto the board, if any."""
        if not 0 <= player_index < MAX_PLAYER - 1:
            raise ValueError(f"client index must be 0..{MAX_PLAYER - 2}, got {player_index}")
        update = decode_client_update(data)
        self.board.scores[player_index + 1] = update.score
        if update.card.area != Area.BOARD:
            return None
        for card in self.board.cards:
            if (
                int(card.suit) == update.card.suit
                and card.number == update.card.number
                and card.area != Area.BOARD
            ):
                self._put_on_board(card)
                return card
        return None

    def apply_event(self, data: bytes) -> EventData:
        """Run a board event announced by the server and roll the event dice for it."""
        event = decode_event(data)
        face = _EVENT_DICE.get(event.event_type)
        if face is not None:
            self.dice.roll(face, self.rng)
        value = event.data
        if event.event_type == Event.FEVER:
            self.board.fever_time()
        elif event.event_type == Event.LUCKY_NUMBER:
            self.board.lucky_number(value)
        elif event.event_type == Event.LIMIT_AREA:
            self.board.limit_area(value % DECK_RANGE, value // DECK_RANGE + 1)
        elif event.event_type == Event.MOVE_AREA:
            self.board.move_area(bool(value >> 7), value & 0x7F)
        elif event.event_type == Event.SHUFFLE_HAND:
            self.board.shuffle_hands(value)
        return event

    # ---------------------------------------------------------------- placing

    def cool_time_remaining(self, now_ms: int) -> int:
        """Milliseconds left before this player may place another card."""
        limit = int(self.board.cool_time * 1000)
        return max(0, limit - (now_ms - self.last_placed_time))

    def try_place(self, card: Card, now_ms: int) -> bool:
        """Place one of this player's cards if the rules and the cool time allow it."""
        if not self.is_game:
            raise RuntimeError("the game has not started")
        board = self.board
        if card.area != Area.for_player(board.player_id):
            return False
        if not board.can_place(card):
            return False
        if self.cool_time_remaining(now_ms) > 0:
            return False
        self.last_placed_time = now_ms
        board.place_card(card, board.player_id)
        board.add_score(board.calculate_score(card))
        if self.link is not None:
            if self.is_server:
                self.link.send_to_clients(board.scores, board.cards)
            else:
                self.link.send_to_server(card, board.score)
        return True