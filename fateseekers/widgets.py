"""Shared widget helpers: colours, nine-slice geometry and input limiting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BUTTON_TEXT_COLOR = Color(11, 16, 37, 255)
NOTIFICATION_ERROR_TEXT_COLOR = Color(245, 0, 0, 255)
NOTIFICATION_INFO_TEXT_COLOR = Color(255, 255, 255, 255)


@dataclass(frozen=True)
class NineSlice:
    """Column widths and row heights of a nine-slice image."""

    widths: tuple[int, int, int]
    heights: tuple[int, int, int]


def _half(value: int) -> int:
    """Halve, truncating toward zero."""
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def _split(total: int, center: int) -> tuple[int, int, int]:
    edge = _half(total - center)
    return (edge, center, total - edge - center)


def nine_slice(width: int, height: int, center_width: int, center_height: int) -> NineSlice:
    """Split an image of the given size around a centred stretchable area."""
    return NineSlice(_split(width, center_width), _split(height, center_height))


def limit_input(current: str, proposed: str, max_symbols: int) -> str:
    """Return the text an input keeps after a change.

    At most one new character is taken per change, and text reaching
    max_symbols characters is refused in favour of the current text.
    """
    added = proposed[len(current):]
    text = proposed
    if len(added) > 1:
        text = current + added[:1]
    if len(text) >= max_symbols:
        return current
    return text