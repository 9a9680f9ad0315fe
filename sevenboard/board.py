"""Board state of the sevens game: hands, placed cards, scoring and board events."""

from __future__ import annotations

import random
from typing import Callable, Sequence

from sevenboard.cards import (
    DECK_RANGE,
    EVENT_TIME,
    LINE_COMPLETE,
    MAX_PLAYER,
    PLACE_CARD,
    PLACE_COOL_TIME,
    RANK_BONUS,
    RANK_DECREMENT,
    ROW_COMPLETE,
    SUIT_NUM,
    Area,
    Card,
    Suit,
    make_deck,
)
from sevenboard.protocol import Event, EventData


def is_derangement(original: Sequence, shuffled: Sequence) -> bool:
    """Return True when no element of ``shuffled`` stays at its original position."""
    if len(original) != len(shuffled):
        raise ValueError("sequences must have the same length")
    return all(a != b for a, b in zip(original, shuffled))


class Board:
    """Cards on the table and in the players' hands, with the rules that move them."""

    def __init__(
        self,
        *,
        is_server: bool = True,
        player_id: int = 0,
        connect_num: int = MAX_PLAYER,
        rng: random.Random | None = None,
        on_event: Callable[[EventData], None] | None = None,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self.is_server = is_server
        self.player_id = player_id
        self.connect_num = connect_num
        self.rng = rng if rng is not None else random.Random()
        self.on_event = on_event
        self.on_finished = on_finished

        self.cards: list[Card] = make_deck()
        self.board_data: list[list[bool]] = [[False] * DECK_RANGE for _ in range(SUIT_NUM)]
        self.hands: list[list[Card]] = []
        self.scores: list[int] = [0] * MAX_PLAYER
        self.score = 0
        self.finish_order: list[int] = []
        self.is_clear = False

        self.cool_time = PLACE_COOL_TIME
        self.area_l = -1
        self.area_r = -1
        self.lucky_num = -1
        self.left_edge_num = 1
        self.event_count_timer = -1
        self.event_summary = ""
        self.show_summary = False

        if is_server:
            self.deal(MAX_PLAYER)

    # ----------------------------------------------------------------- dealing

    def deal(self, player_count: int) -> None:
        """Shuffle the deck, hand the cards out and sort this player's hand."""
        if player_count < 1:
            raise ValueError("player_count must be positive")
        order = list(range(len(self.cards)))
        self.rng.shuffle(order)
        for card, slot in zip(self.cards, order):
            card.area_number = slot
            card.area = Area.for_player(slot % player_count)
        self.collect_hands(player_count)
        if self.player_id < player_count:
            self.sort_hand(self.player_id)

    def collect_hands(self, player_count: int) -> None:
        """Rebuild the hand lists from the area each card belongs to."""
        self.hands = [
            [card for card in self.cards if card.area == Area.for_player(index)]
            for index in range(player_count)
        ]

    def place_sevens(self) -> None:
        """Put every seven still in a hand onto the board, as at the start of a game."""
        for card in self.cards:
            if card.number == 7 and card.area >= Area.PLAYER1:
                self.place_card(card, int(card.area) - int(Area.PLAYER1))

    def sort_hand(self, player_index: int) -> list[Card]:
        """Number the cards of a hand by (number, suit); return them in that order."""
        ordered = sorted(self.hands[player_index], key=lambda c: (c.number, int(c.suit)))
        for slot, card in enumerate(ordered):
            card.area_number = slot
        return ordered

    # ----------------------------------------------------------------- placing

    def can_place(self, card: Card) -> bool:
        """Whether ``card`` may go on the board now."""
        if card.area in (Area.BOARD, Area.INVALID):
            return False
        number = card.number
        if self.area_l != -1 and not self.area_l <= number <= self.area_r:
            return False
        index = number - 1
        left = (index - 1) % DECK_RANGE
        right = (index + 1) % DECK_RANGE
        row = self.board_data[int(card.suit)]
        return row[left] or row[right]

    def place_card(self, card: Card, player_index: int) -> None:
        """Move ``card`` from a player's hand onto the board."""
        card.area_change(Area.BOARD, self.left_edge_num)
        self.board_data[int(card.suit)][card.number - 1] = True

        hand = self.hands[player_index]
        if card in hand:
            hand.remove(card)
        if self.player_id < len(self.hands):
            self.sort_hand(self.player_id)

        if not hand and player_index not in self.finish_order:
            rank = len(self.finish_order)
            self.score += RANK_BONUS - RANK_DECREMENT * rank
            self.finish_order.append(player_index)
            if player_index == self.player_id:
                self.is_clear = True
            if rank == MAX_PLAYER - 1 and self.on_finished is not None:
                self.on_finished()

    # ----------------------------------------------------------------- scoring

    def calculate_score(self, card: Card) -> int:
        """Points earned for placing ``card``."""
        points = PLACE_CARD
        if self.is_complete_row_of_suit(card.number):
            points += ROW_COMPLETE
        if self.is_complete_column_at(card.suit):
            points += LINE_COMPLETE
        if self.lucky_num == card.number:
            points += PLACE_CARD * 4
        return points

    def is_complete_row_of_suit(self, number: int) -> bool:
        """Whether the card ``number`` of every suit lies on the board."""
        return all(
            card.area == Area.BOARD for card in self.cards if card.number == number
        )

    def is_complete_column_at(self, suit: Suit) -> bool:
        """Whether every card of ``suit`` lies on the board."""
        return all(self.board_data[int(suit)])

    def add_score(self, value: int) -> int:
        self.score += value
        self.scores[self.player_id] = self.score
        return self.score

    # ----------------------------------------------------------------- events

    def _emit(self, event: EventData) -> None:
        if self.on_event is not None:
            self.on_event(event)

    def _announce(self, text: str) -> None:
        self.event_summary = text
        self.show_summary = True

    def _unfilled_cards(self) -> list[Card]:
        return [card for card in self.cards if card.area != Area.BOARD]

    def init_event_members(self) -> None:
        """Reset every effect a board event may have left behind."""
        self.cool_time = PLACE_COOL_TIME
        self.area_l = -1
        self.area_r = -1
        self.lucky_num = -1

    def fever_time(self) -> None:
        """Halve the cool time between placements."""
        self.cool_time = self.cool_time / 2
        self._announce("クールタイム短縮中！")

    def lucky_number(self, num: int) -> None:
        """Give a bonus for one number; the server picks it among unplaced cards."""
        if self.is_server:
            unfilled = self._unfilled_cards()
            if not unfilled:
                return
            self.lucky_num = self.rng.choice(unfilled).number
            self._emit(EventData(Event.LUCKY_NUMBER, self.lucky_num))
        else:
            self.lucky_num = num
        self._announce(f"{self.lucky_num}を置くとスコアボーナス!")

    def limit_area(self, left: int, right: int) -> None:
        """Allow only numbers in [left, right]; the server draws the bounds."""
        if self.is_server:
            unfilled = self._unfilled_cards()
            if len({card.number for card in unfilled}) < 2:
                return
            first = second = self.rng.choice(unfilled).number
            while first == second:
                first = self.rng.choice(unfilled).number
                second = self.rng.choice(unfilled).number
            self.area_l, self.area_r = min(first, second), max(first, second)
            limit = (self.area_r - 1) * DECK_RANGE + self.area_l
            self._emit(EventData(Event.LIMIT_AREA, limit))
        else:
            self.area_l = left
            self.area_r = right
        self._announce(f"{self.area_l}～{self.area_r}に制限中")

    def move_area(self, left: bool, num: int) -> None:
        """Shift the board's left edge by one and slide the placed cards."""
        if self.is_server:
            is_left = self.rng.randint(0, 1)
            num = self.rng.randint(1, DECK_RANGE)
            step = 1 if is_left else -1
            self._emit(EventData(Event.MOVE_AREA, (is_left << 7) + num))
        else:
            step = 1 if (num and left) else -1
        self.left_edge_num = (self.left_edge_num + step - 1 + DECK_RANGE) % DECK_RANGE + 1
        for card in self.cards:
            card.slide(self.left_edge_num)
        self._announce("エリアが移動！")

    def _reassign_hands(self, permutation: Sequence[int]) -> None:
        count = len(permutation)
        if sorted(permutation) != list(range(count)):
            raise ValueError(f"not a permutation of the players: {list(permutation)}")
        new_hands = list(self.hands)
        for index, target in enumerate(permutation):
            for card in self.hands[index]:
                card.area = Area.for_player(target)
            new_hands[target] = self.hands[index]
        self.hands = new_hands

    def shuffle_hands(self, recv_data: int) -> None:
        """Swap whole hands between players so that nobody keeps their own."""
        count = min(self.connect_num, len(self.hands))
        if self.is_server:
            if count < 2:
                raise ValueError("at least two players are needed to swap hands")
            original = list(range(count))
            permutation = list(original)
            while not is_derangement(original, permutation):
                self.rng.shuffle(permutation)
            self._reassign_hands(permutation)
            data = 0
            for index, target in enumerate(permutation):
                data |= (target & 0b11) << (index * 2)
            self._emit(EventData(Event.SHUFFLE_HAND, data))
        else:
            decoded = [(recv_data >> (index * 2)) & 0b11 for index in range(MAX_PLAYER)]
            self._reassign_hands(decoded[:count])
        if self.player_id < len(self.hands):
            self.sort_hand(self.player_id)
        self._announce("手札が入れ替わった!")

    def draw_event(self) -> int:
        """Draw and run a random board event; return the drawn number (0..4)."""
        roll = self.rng.randint(0, 4)
        if roll == 0:
            self.fever_time()
        elif roll == 1:
            self.lucky_number(-1)
        elif roll == 2:
            self.limit_area(-1, -1)
        elif roll == 3:
            self.move_area(True, -1)
        else:
            self.shuffle_hands(0)
        self.event_count_timer = EVENT_TIME
        return roll