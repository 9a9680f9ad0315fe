"""Scene switching, either immediately or with the next scene built in the background."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Callable


class SceneTag(Enum):
    TITLE = "title"
    GAME = "game"
    RESULT = "result"
    MAIN_MENU = "main_menu"
    OPTION = "option"
    NOT_FOUND = "not_found"


class SceneLoadState(Enum):
    WAIT = "wait"
    LOADING = "loading"
    COMPLETED = "completed"


class Scene:
    """Base of a scene; subclasses set ``tag`` and extend the hooks they need.

    The base hooks keep track of the scene's lifecycle so that the manager's
    handling of it can be observed.
    """

    tag: SceneTag = SceneTag.NOT_FOUND

    def __init__(self) -> None:
        self.next_scene_tag = SceneTag.NOT_FOUND
        self.next_scene_tag_async = SceneTag.NOT_FOUND
        self.awakened = False
        self.loaded = False
        self.closed = False
        self.frames = 0
        self.late_frames = 0

    def async_awake(self) -> None:
        """Run on the loading thread after the scene is built."""
        self.awakened = True

    def load_complete(self) -> None:
        """Run once the scene becomes the current one."""
        self.loaded = True

    def update(self) -> None:
        """Run every frame; counts the frames seen."""
        self.frames += 1

    def late_update(self) -> None:
        """Run every frame after ``update``; counts the frames seen."""
        self.late_frames += 1

    def close(self) -> None:
        """Run when the scene is discarded."""
        self.closed = True


class SceneManager:
    """Runs the current scene and changes scenes on request."""

    def __init__(self) -> None:
        self.current_tag = SceneTag.NOT_FOUND
        self.current: Scene | None = None
        self.load_state = SceneLoadState.WAIT
        self._factories: dict[SceneTag, Callable[[], Scene]] = {}
        self._thread: threading.Thread | None = None
        self._loaded: Scene | None = None

    def register(self, tag: SceneTag, factory: Callable[[], Scene]) -> None:
        if tag == SceneTag.NOT_FOUND:
            raise ValueError("cannot register a scene for NOT_FOUND")
        self._factories[tag] = factory

    def _factory(self, tag: SceneTag) -> Callable[[], Scene]:
        try:
            return self._factories[tag]
        except KeyError:
            raise KeyError(f"no scene registered for {tag}") from None

    def change_sync(self, tag: SceneTag) -> bool:
        """Replace the current scene right away; return False when nothing changes."""
        if tag == self.current_tag or tag == SceneTag.NOT_FOUND:
            return False
        factory = self._factory(tag)
        if self.current is not None:
            self.current.close()
            self.current = None
        self.current = factory()
        self.current_tag = tag
        self.current.load_complete()
        return True

    def change_async(self, tag: SceneTag) -> bool:
        """Build the next scene on a thread; return False when the request is ignored."""
        if (self._thread is not None and self._thread.is_alive()) or self.load_state != SceneLoadState.WAIT:
            return False
        if tag == self.current_tag or tag == SceneTag.NOT_FOUND:
            return False
        factory = self._factory(tag)
        self.load_state = SceneLoadState.LOADING
        self._thread = threading.Thread(target=self._load, args=(factory,), daemon=True)
        self._thread.start()
        return True

    def _load(self, factory: Callable[[], Scene]) -> None:
        scene = factory()
        scene.async_awake()
        self._loaded = scene
        self.load_state = SceneLoadState.COMPLETED

    def join(self, timeout: float | None = None) -> None:
        """Wait for a background load to finish."""
        if self._thread is not None:
            self._thread.join(timeout)

    def update(self) -> None:
        if self.current is None:
            raise RuntimeError("no current scene")
        self.current.update()

        if self.load_state == SceneLoadState.COMPLETED:
            old, self.current = self.current, self._loaded
            self._loaded = None
            self.current_tag = self.current.tag
            self.current.next_scene_tag_async = SceneTag.NOT_FOUND
            old.close()
            self.join()
            self._thread = None
            self.load_state = SceneLoadState.WAIT
            self.current.load_complete()

        requested = self.current.next_scene_tag
        if requested not in (SceneTag.NOT_FOUND, self.current_tag):
            self.change_sync(requested)

        requested = self.current.next_scene_tag_async
        if requested not in (SceneTag.NOT_FOUND, self.current_tag):
            self.change_async(requested)

    def late_update(self) -> None:
        if self.current is None:
            raise RuntimeError("no current scene")
        self.current.late_update()