"""Playing cards of the sevens board game and the game's shared constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SUIT_NUM = 4
DECK_RANGE = 13
PLAYER_NUM = 4
MAX_PLAYER = 4

# Scoring.
PLACE_CARD = 10
LINE_COMPLETE = 100
ROW_COMPLETE = 25
RANK_BONUS = 200
RANK_DECREMENT = 50

# Timing.
PLACE_COOL_TIME = 1.5
EVENT_TIME = 6000

# Geometry.
CARD_WIDTH = 90
CARD_HEIGHT = 135
CARD_SIZE_ON_BOARD = 0.75
DEFAULT_CARD_POSITION_LOCAL = (-102.0, -8.55)
FIELD_BEZEL_LOCAL = (7.5, 10.55)
CARD_COLLISION_WIDTH = 60.0
CARD_COLLISION_HEIGHT = 90.0
HAND_POSITION = (-55.0, 50.0, 0.0)

Vec3 = tuple


class Suit(IntEnum):
    HEART = 0
    DIA = 1
    CLAB = 2
    SPADE = 3


class Area(IntEnum):
    INVALID = 0
    BOARD = 1
    PLAYER1 = 2
    PLAYER2 = 3
    PLAYER3 = 4
    PLAYER4 = 5

    @classmethod
    def for_player(cls, player_index: int) -> "Area":
        """Return the hand area of the player with the given zero-based index."""
        return cls(int(cls.PLAYER1) + player_index)


@dataclass(eq=False)
class Card:
    """A single card; compared by identity, like the shared card objects of a deck."""

    suit: Suit
    number: int
    area: Area = Area.INVALID
    area_number: int = -1
    position: Vec3 = HAND_POSITION
    rotate: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)
    collision_center: Vec3 = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        self.suit = Suit(self.suit)
        if not 1 <= self.number <= DECK_RANGE:
            raise ValueError(f"card number must be 1..{DECK_RANGE}, got {self.number}")
        self.area = Area(self.area)

    @property
    def code(self) -> int:
        """Index of the card in a sorted deck (suit * 13 + number - 1)."""
        return int(self.suit) * DECK_RANGE + self.number - 1

    @property
    def frame_id(self) -> int:
        """Frame of the card inside the shared card model."""
        suit = int(self.suit)
        return self.number + DECK_RANGE * suit + suit + 1

    def board_column(self, left_edge_num: int) -> int:
        """Column of the card on the board when the leftmost number is ``left_edge_num``."""
        column = (DECK_RANGE - self.number + left_edge_num) % DECK_RANGE
        if column <= 0:
            column += DECK_RANGE
        return column - 1

    def board_position(self, left_edge_num: int) -> Vec3:
        """Local position the card takes when it lies on the board."""
        column = self.board_column(left_edge_num)
        base_x, base_y = DEFAULT_CARD_POSITION_LOCAL
        bezel_x, bezel_y = FIELD_BEZEL_LOCAL
        return (base_x + column * bezel_x, base_y + int(self.suit) * bezel_y, 0.0)

    def area_change(self, new_area: Area, left_edge_num: int) -> bool:
        """Move the card to ``new_area``; return False when it was already there."""
        new_area = Area(new_area)
        if self.area == new_area:
            return False
        self.area = new_area
        if new_area == Area.BOARD:
            self.position = self.board_position(left_edge_num)
            self.scale = (CARD_SIZE_ON_BOARD,) * 3
            if self.rotate[2] != 180.0:
                self.rotate = (0.0, 0.0, 180.0)
        return True

    def slide(self, left_edge_num: int) -> bool:
        """Realign a card on the board after the left edge moved."""
        if self.area != Area.BOARD:
            return False
        self.position = self.board_position(left_edge_num)
        return True


def card_from_code(code: int) -> Card:
    """Build the card with the given deck index (0..51)."""
    if not 0 <= code < SUIT_NUM * DECK_RANGE:
        raise ValueError(f"card code must be 0..{SUIT_NUM * DECK_RANGE - 1}, got {code}")
    return Card(Suit(code // DECK_RANGE), code % DECK_RANGE + 1)


def make_deck() -> list[Card]:
    """Return the full deck in suit-then-number order."""
    return [card_from_code(code) for code in range(SUIT_NUM * DECK_RANGE)]