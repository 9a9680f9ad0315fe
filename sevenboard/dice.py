"""The event dice: a tumbling roll that settles on the face of the drawn result."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

ROLL_DURATION = 90
HOLD_FRAMES = 600

_FACE_ROTATIONS = {
    1: (-math.pi / 2, 0.0, 0.0),
    2: (0.0, -math.pi / 2, 0.0),
    3: (math.pi, 0.0, 0.0),
    4: (0.0, 0.0, 0.0),
    5: (-math.pi, math.pi / 2, 0.0),
    6: (math.pi / 2, 0.0, 0.0),
}


def rotation_for_result(value: int) -> tuple[float, float, float] | None:
    """Rotation that shows face ``value`` on top, or None for a value with no face."""
    return _FACE_ROTATIONS.get(value)


@dataclass
class Dice:
    """A die model that spins towards a random target, then shows the result face."""

    position: tuple[float, float, float] = (720.0, 850.0, -350.0)
    rotate: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[float, float, float] = (0.7, 0.7, 0.7)
    is_rolling: bool = False
    num: int = 0
    target: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))
    duration: int = ROLL_DURATION

    def roll(self, result: int, rng: random.Random | None = None) -> tuple[float, float, float]:
        """Start a roll that will settle on ``result``; return the spin target rotation."""
        rng = rng if rng is not None else random.Random()
        self.num = result
        self.is_rolling = True
        self.duration = ROLL_DURATION
        self.rotate = (0.0, 0.0, 0.0)
        base = (0.3, 0.4, 0.2)
        self.target = tuple(
            start + (offset + rng.randint(0, 100) / 500.0) * self.duration
            for start, offset in zip(self.rotate, base)
        )
        return self.target

    def finish(self) -> tuple[float, float, float]:
        """End the spin: turn the die to the face of the rolled result and return it."""
        face = rotation_for_result(self.num)
        if face is not None:
            self.rotate = face
        return self.rotate

    def reset(self) -> None:
        """Hide the die again after the result has been shown."""
        self.is_rolling = False
        self.rotate = (0.0, 0.0, 0.0)