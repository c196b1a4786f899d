"""
Sweep component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SkippedRecord:
    """A stored record the sweep could not interpret."""

    user_id: str | None
    reason: str


# --- Input Models ---


@dataclass(frozen=True)
class PlanSweepInput:
    """Input for planning a deactivation sweep."""

    user_ids: list[str] | None = None


@dataclass(frozen=True)
class SummarizeInput:
    """Input for counting accounts close to deactivation."""


# --- Output Models ---


@dataclass(frozen=True)
class SweepPlan:
    """Decisions a scheduled job should apply; nothing has been written."""

    planned_at: datetime
    to_deactivate: list[str] = field(default_factory=list)
    to_warn: list[str] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)


@dataclass(frozen=True)
class PendingSummary:
    evaluated_at: datetime
    expiring_24h: int = 0
    expiring_48h: int = 0
    already_deactivated: int = 0
    skipped: int = 0
