from sevenboard.mouse import ButtonTracker, InputState, Mouse


def _run(presses):
    tracker = ButtonTracker()
    return [tracker.update(p) for p in presses]


def test_press_hold_release_cycle():
    assert _run([True, True, True, False, False]) == [
        InputState.STARTED,
        InputState.PERFORMED,
        InputState.PERFORMED,
        InputState.CANCELED,
        InputState.WAITING,
    ]


def test_idle_button_stays_waiting():
    assert _run([False, False]) == [InputState.WAITING, InputState.WAITING]


def test_quick_tap_cancels_from_started():
    assert _run([True, False]) == [InputState.STARTED, InputState.CANCELED]


def test_press_after_cancel_starts_again():
    assert _run([True, False, True]) == [
        InputState.STARTED,
        InputState.CANCELED,
        InputState.STARTED,
    ]


def test_mouse_click_only_on_first_frame():
    mouse = Mouse()
    mouse.update((10, 20), False, True)
    assert mouse.is_right_clicked() is True
    assert mouse.is_left_clicked() is False
    assert mouse.position == (10, 20)
    mouse.update((10, 20), False, True)
    assert mouse.is_right_clicked() is False
    assert mouse.right.state == InputState.PERFORMED


def test_left_button_independent_of_right():
    mouse = Mouse()
    mouse.update((0, 0), True, False)
    assert mouse.is_left_clicked() is True
    assert mouse.right.state == InputState.WAITING


def test_disabled_mouse_resets():
    mouse = Mouse()
    mouse.update((5, 5), True, True)
    mouse.disable()
    mouse.update((7, 7), True, True)
    assert mouse.position == (-1, -1)
    assert mouse.left.state == InputState.WAITING
    assert mouse.right.state == InputState.WAITING
    assert mouse.is_right_clicked() is False


def test_reenabled_mouse_tracks_again():
    mouse = Mouse()
    mouse.disable()
    mouse.update((1, 1), True, False)
    mouse.enable()
    mouse.update((3, 4), True, False)
    assert mouse.position == (3, 4)
    assert mouse.is_left_clicked() is True