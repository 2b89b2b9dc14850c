"""Localised message lookup from JSON message files."""

from __future__ import annotations

import json
import re
from typing import Any, Mapping, Union

ENGLISH = "en"
UKRAINIAN = "uk"

DEFAULT_LANGUAGE = ENGLISH

_RESERVED_KEYS = (
    "id",
    "description",
    "hash",
    "leftdelim",
    "rightdelim",
    "zero",
    "one",
    "two",
    "few",
    "many",
    "other",
)
_PLURAL_FORMS = ("other", "many", "few", "two", "one", "zero")

_PLACEHOLDER = re.compile(r"\{\{\s*\.(\w+)\s*\}\}")


class MissingTranslationError(LookupError):
    """Raised when a message is defined in no loaded language."""


def _is_message(value: Any) -> bool:
    if isinstance(value, str):
        return True
    if isinstance(value, dict):
        return any(isinstance(value.get(key), str) for key in _RESERVED_KEYS)
    return False


def _message_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    for form in _PLURAL_FORMS:
        text = value.get(form)
        if isinstance(text, str):
            return text
    return ""


def _collect(data: Mapping[str, Any], prefix: str, messages: dict[str, str]) -> None:
    for key, value in data.items():
        message_id = f"{prefix}{key}"
        if _is_message(value):
            if isinstance(value, dict) and isinstance(value.get("id"), str):
                message_id = value["id"]
            messages[message_id] = _message_text(value)
        elif isinstance(value, dict):
            _collect(value, f"{message_id}.", messages)
        else:
            raise ValueError(f"invalid message {message_id!r}")


def parse_message_file(raw: Union[str, bytes]) -> dict[str, str]:
    """Parse a JSON message file into a mapping of message id to text.

    Nested objects that are not messages contribute their keys joined by dots.
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("message file must be a JSON object")
    messages: dict[str, str] = {}
    _collect(data, "", messages)
    return messages


def _render(template: str, data: Mapping[str, Any]) -> str:
    def replace(match: re.Match) -> str:
        key = match.group(1)
        return str(data[key]) if key in data else "<no value>"

    return _PLACEHOLDER.sub(replace, template)


class TranslationManager:
    """Looks up messages in the selected language, falling back to English."""

    def __init__(
        self, templates: Mapping[str, Union[str, bytes]], language: str
    ) -> None:
        self._messages = {tag: parse_message_file(raw) for tag, raw in templates.items()}
        if language not in self._messages:
            raise ValueError(f"unsupported language: {language!r}")
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def get_translation(self, key: str, *args: Mapping[str, Any]) -> str:
        """Return the message for key, filling {{.Name}} fields from args."""
        for tag in (self._language, DEFAULT_LANGUAGE):
            messages = self._messages.get(tag, {})
            if key in messages:
                data: dict[str, Any] = {}
                for arg in args:
                    data.update(arg)
                return _render(messages[key], data)
        raise MissingTranslationError(
            f'message "{key}" not found in language "{self._language}"'
        )