"""Timed queues of subtitles and notifications shown one at a time."""

from __future__ import annotations

import time
from collections import deque
from typing import Any, Callable, Optional, Protocol

from fateseekers.dto import NotificationUnit, SubtitlesUnit

Clock = Callable[[], float]


class SubtitlesDisplay(Protocol):
    """Where subtitles are shown."""

    def set_text(self, value: str) -> None: ...

    def clean_text(self) -> None: ...


class NotificationDisplay(Protocol):
    """Where notifications are shown."""

    def set_text(self, value: str, color: Any) -> None: ...

    def clean_text(self) -> None: ...


class SubtitlesManager:
    """Shows queued subtitles in turn, each for its duration in seconds."""

    def __init__(self, display: SubtitlesDisplay, clock: Clock = time.monotonic) -> None:
        self._display = display
        self._clock = clock
        self._deadline: Optional[float] = None
        self._text_updated = False
        self._queue: deque[SubtitlesUnit] = deque()

    def update(self) -> None:
        """Show the head of the queue and drop it once its time is up."""
        if not self._queue:
            return
        unit = self._queue[0]
        if self._deadline is None:
            self._deadline = self._clock() + unit.duration
        if not self._text_updated:
            self._display.set_text(unit.text)
            self._text_updated = True
        if self._clock() >= self._deadline:
            self._queue.popleft()
            self._display.clean_text()
            self._text_updated = False
            self._deadline = None

    def push(self, text: str, duration: float) -> None:
        self._queue.append(SubtitlesUnit(text=text, duration=duration))

    def reset(self) -> None:
        """Remove every queued subtitle."""
        self._queue.clear()

    def is_empty(self) -> bool:
        return not self._queue


class NotificationManager:
    """Shows queued notifications; a notification's time runs only while visible."""

    def __init__(self, display: NotificationDisplay, clock: Clock = time.monotonic) -> None:
        self._display = display
        self._clock = clock
        self._deadline: Optional[float] = None
        self._visible = False
        self._text_updated = False
        self._queue: deque[NotificationUnit] = deque()

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def text_updated(self) -> bool:
        return self._text_updated

    def toggle_visible(self) -> None:
        self._visible = not self._visible

    def update(self) -> None:
        """Show the head of the queue and drop it once its visible time is up."""
        if not self._queue:
            return
        unit = self._queue[0]
        if not self._text_updated:
            self._display.set_text(unit.text, unit.color)
            self._text_updated = True
        if self._deadline is None and self._visible:
            self._deadline = self._clock() + unit.duration
        if self._deadline is not None and self._clock() >= self._deadline:
            self._queue.popleft()
            self._display.clean_text()
            self._text_updated = False
            self._visible = False
            self._deadline = None

    def push(self, text: str, duration: float, color: Any) -> None:
        self._queue.append(NotificationUnit(text=text, color=color, duration=duration))

    def reset(self) -> None:
        """Remove every queued notification."""
        self._queue.clear()

    def is_empty(self) -> bool:
        return not self._queue