"""
Sweep component port definitions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Protocol


class TimePort(Protocol):
    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


class UserSourcePort(Protocol):
    def list_all(self) -> Iterable[Mapping[str, Any]]:
        """All raw user records."""
        ...
