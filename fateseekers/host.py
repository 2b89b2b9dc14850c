"""Validation of networking host values."""

from __future__ import annotations

import re

_ALLOWED = re.compile(
    r"^(?P<host>([a-zA-Z0-9]+\.)*[a-zA-Z0-9]+\.[a-zA-Z]{2,63}|localhost"
    r"|\b\d{1,3}(\.\d{1,3}){3}):(?P<port>\d{1,5})\Z",
    re.ASCII,
)


def validate(value: str) -> bool:
    """Return True if value is a host (domain, localhost or IPv4) with a port."""
    return _ALLOWED.match(value) is not None