"""Selection cursor that eases towards its target position and size."""

from __future__ import annotations

from dataclasses import dataclass

EASING = 0.3


@dataclass
class Cursor:
    """A filled box; each step moves position and scale 30% of the way to their targets."""

    position: tuple[float, float]
    scale: tuple[float, float]
    color: tuple[int, int, int] = (100, 100, 255)
    target_position: tuple[float, float] | None = None
    target_scale: tuple[float, float] | None = None

    def __post_init__(self) -> None:
        if self.target_position is None:
            self.target_position = self.position
        if self.target_scale is None:
            self.target_scale = self.scale

    @staticmethod
    def _ease(current, target):
        return tuple(c + (t - c) * EASING for c, t in zip(current, target))

    def step(self) -> tuple[int, int, int, int]:
        """Return the box drawn this frame (left, top, right, bottom), then ease."""
        px, py = int(self.position[0]), int(self.position[1])
        sx, sy = int(self.scale[0]), int(self.scale[1])
        rect = (px - sx, py - sy, px + sx, py + sy)
        self.position = self._ease(self.position, self.target_position)
        self.scale = self._ease(self.scale, self.target_scale)
        return rect