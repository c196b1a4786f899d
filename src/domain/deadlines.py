"""
Verification deadline arithmetic.

Day counts use ceiling division of the millisecond difference by one day,
so any part of a day left counts as a full day.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from src.domain.boundary import AccessInputError
from src.domain.entities import UserSnapshot
from src.rules.models import DEFAULT_RULES, AccessRules

DAY_MS = 24 * 60 * 60 * 1000


def _to_ms(delta: timedelta) -> int:
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def _as_utc(dt: datetime) -> datetime:
    # Naive timestamps are UTC, as for stored deadlines
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt


def days_remaining(deadline: datetime, now: datetime) -> int:
    """Signed whole days until deadline; zero or negative once it has passed."""
    return -(-_to_ms(_as_utc(deadline) - _as_utc(now)) // DAY_MS)


def days_until_deactivation(user: UserSnapshot, now: datetime) -> int | None:
    """
    Days left before the verification deadline, clamped at zero.

    Returns None when no deadline is set. Zero means due now or overdue.
    """
    if user.verification_deadline is None:
        return None
    return max(0, days_remaining(user.verification_deadline, now))


def initial_deadline(registered_at: datetime, rules: AccessRules = DEFAULT_RULES) -> datetime:
    """Deadline assigned when a user completes signup."""
    return registered_at + timedelta(days=rules.deadlines.grace_period_days)


def extended_deadline(
    current: datetime | None,
    now: datetime,
    additional_days: int | None = None,
    rules: AccessRules = DEFAULT_RULES,
) -> datetime:
    """
    Deadline after an admin extension.

    Extends from whichever is later, the current deadline or now, so an
    overdue account still receives the full extension.
    """
    if additional_days is None:
        additional_days = rules.deadlines.extension_days
    if additional_days <= 0:
        raise AccessInputError(f"additional_days must be positive, got {additional_days}")

    now = _as_utc(now)
    base = now if current is None else max(_as_utc(current), now)
    return base + timedelta(days=additional_days)
