"""Final ranking of the players and the lines shown on the result screen."""

from __future__ import annotations

from typing import Sequence

MEDAL_WIDTH = 80
MEDAL_HEIGHT = 120
PADDING_GH = 60
FONT_SIZE = 100
PADDING_STRING = 80
STRING_DEFAULT_POS = 1920
STRING_TARGET_POS = 700


def rank_players(scores: Sequence[int]) -> list[int]:
    """Player indices from the highest score to the lowest."""
    return sorted(range(len(scores)), key=lambda index: -scores[index])


def result_lines(scores: Sequence[int], player_id: int) -> list[str]:
    """Text of each ranking line; the line at position ``player_id`` reads "You"."""
    lines = []
    for position, index in enumerate(rank_players(scores)):
        if position == player_id:
            lines.append(f"You: {scores[index]}")
        else:
            lines.append(f"Player{index + 1}: {scores[index]}")
    return lines