"""Screen fade in and fade out driven frame by frame."""

from __future__ import annotations

from typing import Callable

MAX_ALPHA = 255


class Fader:
    """Alpha of a full-screen fade image, with delayed actions counted in frames."""

    def __init__(self) -> None:
        self.is_fade = False
        self.alpha = 0
        self.add = 0
        self._timers: list[list] = []

    def _delay(self, frames: int, action: Callable[[], None]) -> None:
        self._timers.append([frames, action])

    @staticmethod
    def _check_speed(speed: int) -> None:
        if speed <= 0:
            raise ValueError(f"fade speed must be positive, got {speed}")

    def fade_in(self, speed: int, frame: int, auto_fade_out: bool = True) -> bool:
        """Start darkening the screen; return False when a fade is already running."""
        self._check_speed(speed)
        if self.is_fade:
            return False
        self.is_fade = True
        self.add = speed
        self.alpha = 0
        if auto_fade_out:
            def _back() -> None:
                self.alpha = MAX_ALPHA
                self.fade_out(self.add)

            self._delay(MAX_ALPHA // speed + frame, _back)
        return True

    def fade_out(self, speed: int) -> bool:
        """Start clearing the screen; return False when no fade is running."""
        self._check_speed(speed)
        if not self.is_fade:
            return False
        self.add = -speed

        def _done() -> None:
            self.is_fade = False
            self.alpha = 0

        self._delay(MAX_ALPHA // speed, _done)
        return True

    def step(self) -> int | None:
        """Advance one frame; return the alpha drawn, or None when not fading."""
        due = []
        for timer in self._timers:
            timer[0] -= 1
            if timer[0] <= 0:
                due.append(timer)
        self._timers = [t for t in self._timers if t[0] > 0]
        for _, action in due:
            action()
        if not self.is_fade:
            return None
        drawn = self.alpha
        self.alpha = max(0, min(MAX_ALPHA, self.alpha + self.add))
        return drawn