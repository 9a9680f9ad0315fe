"""Game logic for a networked real-time sevens card game: cards, board rules, events, UDP messages, input, fades, results and scenes."""

__version__ = "0.1.0"

__all__ = [
    "board",
    "cards",
    "cursor",
    "dice",
    "fade",
    "game",
    "mouse",
    "protocol",
    "results",
    "scenes",
]