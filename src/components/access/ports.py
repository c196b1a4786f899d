"""
Access component port definitions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Protocol


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


class UserSourcePort(Protocol):
    """Read-only source of raw user records."""

    def get_by_id(self, user_id: str) -> Mapping[str, Any] | None:
        """Get a raw record by id."""
        ...

    def list_all(self) -> Iterable[Mapping[str, Any]]:
        """All raw records."""
        ...
