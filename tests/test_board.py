import random

import pytest

from sevenboard.board import Board, is_derangement
from sevenboard.cards import (
    DECK_RANGE,
    EVENT_TIME,
    LINE_COMPLETE,
    MAX_PLAYER,
    PLACE_CARD,
    PLACE_COOL_TIME,
    RANK_BONUS,
    ROW_COMPLETE,
    SUIT_NUM,
    Area,
    Suit,
)
from sevenboard.protocol import Event


def make_board(seed=1, **kwargs):
    events = []
    board = Board(is_server=True, player_id=0, rng=random.Random(seed), on_event=events.append, **kwargs)
    return board, events


def find(board, suit, number):
    return next(c for c in board.cards if c.suit == suit and c.number == number)


def owner(card):
    return int(card.area) - int(Area.PLAYER1)


def test_is_derangement():
    assert is_derangement([0, 1, 2], [1, 2, 0]) is True
    assert is_derangement([0, 1, 2], [0, 2, 1]) is False


def test_is_derangement_length_mismatch():
    with pytest.raises(ValueError):
        is_derangement([0, 1], [1])


def test_deal_gives_equal_disjoint_hands():
    board, _ = make_board()
    assert len(board.hands) == MAX_PLAYER
    assert all(len(hand) == DECK_RANGE for hand in board.hands)
    ids = {id(card) for hand in board.hands for card in hand}
    assert len(ids) == SUIT_NUM * DECK_RANGE
    for index, hand in enumerate(board.hands):
        assert all(card.area == Area.for_player(index) for card in hand)


def test_sort_hand_numbers_by_number_then_suit():
    board, _ = make_board()
    ordered = board.sort_hand(1)
    assert [c.area_number for c in ordered] == list(range(len(ordered)))
    keys = [(c.number, int(c.suit)) for c in ordered]
    assert keys == sorted(keys)


def test_place_sevens():
    board, _ = make_board()
    board.place_sevens()
    assert all(board.board_data[s][6] for s in range(SUIT_NUM))
    assert sum(len(h) for h in board.hands) == SUIT_NUM * DECK_RANGE - SUIT_NUM
    assert all(find(board, s, 7).area == Area.BOARD for s in Suit)


def test_can_place_neighbours():
    board, _ = make_board()
    board.place_sevens()
    assert board.can_place(find(board, Suit.HEART, 6)) is True
    assert board.can_place(find(board, Suit.SPADE, 8)) is True
    assert board.can_place(find(board, Suit.DIA, 5)) is False
    assert board.can_place(find(board, Suit.DIA, 7)) is False


def test_can_place_wraps_around():
    board, _ = make_board()
    king = find(board, Suit.CLAB, DECK_RANGE)
    board.place_card(king, owner(king))
    assert board.can_place(find(board, Suit.CLAB, 1)) is True


def test_can_place_respects_limit_area():
    board, _ = make_board()
    board.place_sevens()
    board.area_l, board.area_r = 8, 9
    assert board.can_place(find(board, Suit.HEART, 6)) is False
    assert board.can_place(find(board, Suit.HEART, 8)) is True


def test_score_for_complete_column():
    board, _ = make_board()
    hearts = [find(board, Suit.HEART, n) for n in range(1, DECK_RANGE + 1)]
    for card in hearts:
        board.place_card(card, owner(card))
    assert board.is_complete_column_at(Suit.HEART) is True
    assert board.calculate_score(hearts[-1]) == PLACE_CARD + LINE_COMPLETE


def test_score_for_complete_row():
    board, _ = make_board()
    board.place_sevens()
    assert board.is_complete_row_of_suit(7) is True
    assert board.calculate_score(find(board, Suit.HEART, 7)) == PLACE_CARD + ROW_COMPLETE


def test_lucky_number_client_bonus():
    board = Board(is_server=False)
    board.lucky_number(5)
    assert board.lucky_num == 5
    assert board.calculate_score(find(board, Suit.DIA, 5)) == PLACE_CARD * 5


def test_lucky_number_server_emits_event():
    board, events = make_board()
    board.place_sevens()
    board.lucky_number(-1)
    assert events[-1].event_type == Event.LUCKY_NUMBER
    assert events[-1].data == board.lucky_num
    assert board.lucky_num != 7


def test_add_score_updates_scores():
    board, _ = make_board()
    board.add_score(PLACE_CARD)
    assert board.score == PLACE_CARD
    assert board.scores[board.player_id] == PLACE_CARD


def test_emptying_hand_gives_bonus_and_clears():
    board, _ = make_board()
    for card in list(board.hands[0]):
        board.place_card(card, 0)
    assert board.hands[0] == []
    assert board.score == RANK_BONUS
    assert board.is_clear is True
    assert board.finish_order == [0]


def test_last_finisher_triggers_callback():
    finished = []
    board, _ = make_board(on_finished=lambda: finished.append(True))
    for index in range(MAX_PLAYER):
        for card in list(board.hands[index]):
            board.place_card(card, index)
    assert finished == [True]
    assert board.finish_order == list(range(MAX_PLAYER))


def test_fever_and_reset():
    board, _ = make_board()
    board.fever_time()
    assert board.cool_time == PLACE_COOL_TIME / 2
    board.area_l, board.area_r, board.lucky_num = 2, 5, 3
    board.init_event_members()
    assert (board.cool_time, board.area_l, board.area_r, board.lucky_num) == (PLACE_COOL_TIME, -1, -1, -1)


def test_limit_area_server_event_round_trip():
    board, events = make_board(seed=3)
    board.limit_area(-1, -1)
    assert board.area_l < board.area_r
    event = events[-1]
    assert event.event_type == Event.LIMIT_AREA
    assert event.data % DECK_RANGE == board.area_l
    assert event.data // DECK_RANGE + 1 == board.area_r


def test_limit_area_client():
    board = Board(is_server=False)
    board.limit_area(3, 9)
    assert (board.area_l, board.area_r) == (3, 9)


def test_move_area_client_wraps():
    board = Board(is_server=False)
    board.move_area(True, 1)
    assert board.left_edge_num == 2
    board.move_area(False, 1)
    board.move_area(False, 1)
    assert board.left_edge_num == DECK_RANGE


def test_move_area_server_slides_cards():
    board, events = make_board(seed=5)
    board.place_sevens()
    board.move_area(True, -1)
    event = events[-1]
    assert event.event_type == Event.MOVE_AREA
    assert 1 <= event.data & 0x7F <= DECK_RANGE
    expected_edge = 2 if event.data >> 7 else DECK_RANGE
    assert board.left_edge_num == expected_edge
    seven = find(board, Suit.HEART, 7)
    assert seven.position == seven.board_position(board.left_edge_num)


def test_shuffle_hands_server():
    board, events = make_board(seed=7)
    before = [list(hand) for hand in board.hands]
    board.shuffle_hands(0)
    data = events[-1].data
    assert events[-1].event_type == Event.SHUFFLE_HAND
    for index, hand in enumerate(before):
        target = (data >> (index * 2)) & 0b11
        assert target != index
        assert board.hands[target] == hand
        assert all(card.area == Area.for_player(target) for card in hand)


def test_shuffle_hands_client_matches_server():
    server, events = make_board(seed=11)
    client = Board(is_server=False, player_id=1)
    client.cards = server.cards
    client.hands = [list(hand) for hand in server.hands]
    before = [list(hand) for hand in server.hands]
    server.shuffle_hands(0)
    for card in client.cards:
        pass
    client.hands = before
    client.shuffle_hands(events[-1].data)
    assert client.hands == server.hands


def test_shuffle_hands_client_rejects_bad_data():
    server, _ = make_board()
    client = Board(is_server=False)
    client.hands = [list(hand) for hand in server.hands]
    with pytest.raises(ValueError):
        client.shuffle_hands(0)


def test_draw_event_sets_timer():
    board, _ = make_board(seed=2)
    roll = board.draw_event()
    assert 0 <= roll <= 4
    assert board.event_count_timer == EVENT_TIME
    assert board.show_summary is True