"""Binary UDP messages exchanged between the game server and its clients."""

from __future__ import annotations

import socket
import struct
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Sequence

from sevenboard.cards import MAX_PLAYER, SUIT_NUM, DECK_RANGE, Card

UDP_PORT_NUM = 9999
SYNC_UDP_PORT_NUM = 8888

CLIENT_UPDATE_SIZE = 15
GAME_DATA_SIZE = 250
EVENT_SIZE = 3
DECK_SIZE = SUIT_NUM * DECK_RANGE

_CLIENT_HEADER = struct.Struct("<iIi")
_GAME_HEADER = struct.Struct("<BiI4i")
_CARD = struct.Struct("<BBB")
_EVENT = struct.Struct("<BBB")


class Event(IntEnum):
    COUNT_DOWN = 1
    IS_AGARI = 2
    BOMB = 4
    FEVER = 8
    LUCKY_NUMBER = 16
    LIMIT_AREA = 32
    MOVE_AREA = 64
    SHUFFLE_HAND = 128


class SendDataType(IntEnum):
    UNDEFINE = 0
    GAME_DATA = 1
    EVENT_DATA = 2


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one byte, got {value}")


@dataclass(frozen=True)
class CardData:
    """Three-byte wire form of a card: deck code, area and hand slot."""

    code: int
    area: int
    area_number: int

    def __post_init__(self) -> None:
        _check_byte("code", self.code)
        _check_byte("area", self.area)
        _check_byte("area_number", self.area_number)

    @classmethod
    def from_card(cls, card: Card) -> "CardData":
        return cls(card.code, int(card.area) & 0xFF, card.area_number & 0xFF)

    @property
    def suit(self) -> int:
        return self.code // DECK_RANGE

    @property
    def number(self) -> int:
        return self.code % DECK_RANGE + 1

    def pack(self) -> bytes:
        return _CARD.pack(self.code, self.area, self.area_number)

    @classmethod
    def unpack(cls, data: bytes) -> "CardData":
        return cls(*_CARD.unpack(data))


@dataclass(frozen=True)
class EventData:
    event_type: Event
    data: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "event_type", Event(self.event_type))
        _check_byte("data", self.data)


@dataclass(frozen=True)
class ClientUpdate:
    send_time: int
    send_id: int
    score: int
    card: CardData


@dataclass(frozen=True)
class GameData:
    send_time: int
    send_id: int
    scores: tuple
    cards: tuple


def _expect_size(data: bytes, size: int, what: str) -> None:
    if len(data) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(data)}")


def encode_client_update(send_time: int, send_id: int, score: int, card: CardData) -> bytes:
    """Encode the card a client has just placed, with its score."""
    return _CLIENT_HEADER.pack(send_time, send_id, score) + card.pack()


def decode_client_update(data: bytes) -> ClientUpdate:
    _expect_size(data, CLIENT_UPDATE_SIZE, "client update")
    send_time, send_id, score = _CLIENT_HEADER.unpack_from(data)
    return ClientUpdate(send_time, send_id, score, CardData.unpack(data[_CLIENT_HEADER.size:]))


def encode_game_data(send_time: int, send_id: int, scores: Sequence[int], cards: Sequence[CardData]) -> bytes:
    """Encode the full board state the server broadcasts."""
    if len(scores) != MAX_PLAYER:
        raise ValueError(f"expected {MAX_PLAYER} scores, got {len(scores)}")
    if len(cards) != DECK_SIZE:
        raise ValueError(f"expected {DECK_SIZE} cards, got {len(cards)}")
    body = _GAME_HEADER.pack(SendDataType.GAME_DATA, send_time, send_id, *scores)
    body += b"".join(card.pack() for card in cards)
    return body.ljust(GAME_DATA_SIZE, b"\x00")


def decode_game_data(data: bytes) -> GameData:
    _expect_size(data, GAME_DATA_SIZE, "game data")
    kind, send_time, send_id, *scores = _GAME_HEADER.unpack_from(data)
    if kind != SendDataType.GAME_DATA:
        raise ValueError(f"not a game data packet (type {kind})")
    offset = _GAME_HEADER.size
    cards = tuple(
        CardData.unpack(data[offset + i * _CARD.size: offset + (i + 1) * _CARD.size])
        for i in range(DECK_SIZE)
    )
    return GameData(send_time, send_id, tuple(scores), cards)


def encode_event(event: EventData) -> bytes:
    return _EVENT.pack(SendDataType.EVENT_DATA, event.event_type, event.data)


def decode_event(data: bytes) -> EventData:
    _expect_size(data, EVENT_SIZE, "event")
    kind, event_type, value = _EVENT.unpack(data)
    if kind != SendDataType.EVENT_DATA:
        raise ValueError(f"not an event packet (type {kind})")
    return EventData(Event(event_type), value)


_START = time.monotonic()


def _now_ms() -> int:
    return int((time.monotonic() - _START) * 1000)


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


class UdpLink:
    """Sends game messages over UDP between the server and its clients."""

    def __init__(
        self,
        player_id: int,
        addresses: Iterable[str],
        *,
        sock=None,
        clock: Callable[[], int] | None = None,
        base_port: int = UDP_PORT_NUM,
    ) -> None:
        self.player_id = player_id
        self.addresses = list(addresses)[: MAX_PLAYER - 1]
        if not self.addresses:
            raise ValueError("at least one peer address is required")
        self._owns_socket = sock is None
        self._sock = sock if sock is not None else socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._clock = clock or _now_ms
        self.base_port = base_port
        self._server_send_id = 10000 * player_id
        self._clients_send_id = 10000 * player_id

    def __enter__(self) -> "UdpLink":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_socket:
            self._sock.close()

    def _now(self) -> int:
        return _to_int32(self._clock())

    def send_to_server(self, card: Card, score: int) -> bytes:
        """Tell the server which card this client placed."""
        self._server_send_id = (self._server_send_id + 1) % 2**32
        packet = encode_client_update(self._now(), self._server_send_id, score, CardData.from_card(card))
        self._sock.sendto(packet, (self.addresses[0], self.base_port - self.player_id))
        return packet

    def send_to_clients(self, scores: Sequence[int], cards: Sequence[Card]) -> bytes:
        """Broadcast the whole board to every client."""
        self._clients_send_id = (self._clients_send_id + 1) % 2**32
        packet = encode_game_data(
            self._now(), self._clients_send_id, list(scores), [CardData.from_card(c) for c in cards]
        )
        for index, address in enumerate(self.addresses):
            self._sock.sendto(packet, (address, self.base_port - (index + 1)))
        return packet

    def send_event(self, event: EventData) -> bytes:
        """Announce a board event to every client."""
        packet = encode_event(event)
        for index, address in enumerate(self.addresses):
            self._sock.sendto(packet, (address, self.base_port - (index + 1)))
        return packet