"""Text holders for on-screen notifications and subtitles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fateseekers.widgets import Color

_WHITE = Color(255, 255, 255, 255)


@dataclass(frozen=True)
class TextLine:
    """A line of text and the colour it is drawn in."""

    text: str
    color: Any


class NotificationComponent:
    """Holds the text lines of the notification panel."""

    def __init__(self) -> None:
        self._lines: list[TextLine] = []

    @property
    def lines(self) -> tuple[TextLine, ...]:
        return tuple(self._lines)

    def set_text(self, value: str, color: Any) -> None:
        """Add a line of text in the given colour."""
        self._lines.append(TextLine(value, color))

    def clean_text(self) -> None:
        """Remove every line."""
        self._lines.clear()


class SubtitlesComponent:
    """Holds the text lines of the subtitles panel, drawn in white."""

    def __init__(self) -> None:
        self._lines: list[TextLine] = []

    @property
    def lines(self) -> tuple[TextLine, ...]:
        return tuple(self._lines)

    def set_text(self, value: str) -> None:
        """Add a white line of text."""
        self._lines.append(TextLine(value, _WHITE))

    def clean_text(self) -> None:
        """Remove every line."""
        self._lines.clear()