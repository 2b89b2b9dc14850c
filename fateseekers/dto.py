"""Plain data units shared across the client."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AttachmentType(str, Enum):
    """Kinds of attachment a letter may carry."""

    IMAGE = "image"
    ANIMATION = "animation"
    AUDIO = "audio"


@dataclass(frozen=True)
class GeneratedQuestionUnit:
    """A generated arithmetic question and its answer."""

    question: str
    answer: int


@dataclass(frozen=True)
class LetterLoaderCollectionUnit:
    """Collection a letter belongs to."""

    name: str = ""
    max: int = 0
    index: int = 0


@dataclass(frozen=True)
class LetterLoaderAttachmentUnit:
    """Attachment of a letter: its type and location."""

    type: str = ""
    location: str = ""


@dataclass(frozen=True)
class LetterLoaderUnit:
    """A letter as stored in a raw letter file."""

    text: str = ""
    collection: LetterLoaderCollectionUnit = field(default_factory=LetterLoaderCollectionUnit)
    attachment: LetterLoaderAttachmentUnit = field(default_factory=LetterLoaderAttachmentUnit)


@dataclass(frozen=True)
class SubtitlesUnit:
    """A subtitle line and how many seconds it stays on screen."""

    text: str
    duration: float


@dataclass(frozen=True)
class NotificationUnit:
    """A notification line, its colour and how many seconds it is shown."""

    text: str
    color: Any
    duration: float


@dataclass(frozen=True)
class ReducerResultUnit:
    """One key/value pair produced by a reducer."""

    key: str
    value: Any


def _field(data: dict, key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"field {key!r} must be an integer")
    elif not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


def parse_letter(raw: str | bytes) -> LetterLoaderUnit:
    """Parse a JSON letter document; missing fields take empty values."""
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("letter document must be a JSON object")

    collection = _field(data, "collection", dict, {})
    attachment = _field(data, "attachment", dict, {})

    return LetterLoaderUnit(
        text=_field(data, "text", str, ""),
        collection=LetterLoaderCollectionUnit(
            name=_field(collection, "name", str, ""),
            max=_field(collection, "max", int, 0),
            index=_field(collection, "index", int, 0),
        ),
        attachment=LetterLoaderAttachmentUnit(
            type=_field(attachment, "type", str, ""),
            location=_field(attachment, "location", str, ""),
        ),
    )


def compose_reducer_result(*args: ReducerResultUnit) -> dict[str, Any]:
    """Build a reducer result mapping; later units override earlier ones."""
    return {unit.key: unit.value for unit in args}