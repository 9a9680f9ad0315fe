"""Mouse button state tracking with press/hold/release phases."""

from __future__ import annotations

from enum import Enum


class InputState(Enum):
    WAITING = "waiting"
    STARTED = "started"
    PERFORMED = "performed"
    CANCELED = "canceled"


class ButtonTracker:
    """Follows one button through its waiting/started/performed/canceled cycle."""

    def __init__(self) -> None:
        self.state = InputState.WAITING

    def update(self, pressed: bool) -> InputState:
        state = self.state
        if state in (InputState.WAITING, InputState.CANCELED) and pressed:
            self.state = InputState.STARTED
        elif state == InputState.STARTED and pressed:
            self.state = InputState.PERFORMED
        elif state in (InputState.PERFORMED, InputState.STARTED) and not pressed:
            self.state = InputState.CANCELED
        elif state == InputState.CANCELED and not pressed:
            self.state = InputState.WAITING
        return self.state

    def reset(self) -> None:
        self.state = InputState.WAITING


class Mouse:
    """Cursor position and button phases, updated once per frame."""

    def __init__(self) -> None:
        self.enabled = True
        self.position: tuple[int, int] = (0, 0)
        self.left = ButtonTracker()
        self.right = ButtonTracker()

    def update(self, position: tuple[int, int], left_pressed: bool, right_pressed: bool) -> None:
        if not self.enabled:
            self.position = (-1, -1)
            self.left.reset()
            self.right.reset()
            return
        self.position = (int(position[0]), int(position[1]))
        self.left.update(left_pressed)
        self.right.update(right_pressed)

    def is_left_clicked(self) -> bool:
        return self.left.state == InputState.STARTED

    def is_right_clicked(self) -> bool:
        return self.right.state == InputState.STARTED

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False