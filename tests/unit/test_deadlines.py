from datetime import UTC, datetime, timedelta

import pytest

from src.domain.boundary import AccessInputError
from src.domain.deadlines import (
    days_remaining,
    days_until_deactivation,
    extended_deadline,
    initial_deadline,
)
from src.rules.models import AccessRules, DeadlineRules


def test_no_deadline(make_user, now):
    assert days_until_deactivation(make_user(), now) is None


@pytest.mark.parametrize(
    "offset,expected",
    [
        (timedelta(hours=20), 1),
        (timedelta(days=1), 1),
        (timedelta(days=1, milliseconds=1), 2),
        (timedelta(days=2), 2),
        (timedelta(0), 0),
        (timedelta(hours=-1), 0),
        (timedelta(days=-5), 0),
    ],
)
def test_days_until_deactivation(make_user, now, offset, expected):
    user = make_user(verification_deadline=now + offset)
    assert days_until_deactivation(user, now) == expected


def test_days_remaining_is_signed(now):
    assert days_remaining(now - timedelta(days=3), now) == -3
    assert days_remaining(now - timedelta(hours=1), now) == 0
    assert days_remaining(now - timedelta(hours=25), now) == -1


def test_naive_deadline_treated_as_utc(make_user, now):
    naive = (now + timedelta(hours=20)).replace(tzinfo=None)
    user = make_user(verification_deadline=naive)
    assert user.verification_deadline.tzinfo is UTC
    assert days_until_deactivation(user, now) == 1


def test_initial_deadline_uses_grace_period():
    registered = datetime(2024, 1, 1, 9, 30, tzinfo=UTC)
    assert initial_deadline(registered) == registered + timedelta(days=2)

    rules = AccessRules(deadlines=DeadlineRules(grace_period_days=7))
    assert initial_deadline(registered, rules) == registered + timedelta(days=7)


def test_extend_future_deadline(now):
    current = now + timedelta(hours=6)
    assert extended_deadline(current, now) == current + timedelta(days=2)


def test_extend_overdue_deadline_starts_from_now(now):
    current = now - timedelta(days=4)
    assert extended_deadline(current, now, additional_days=3) == now + timedelta(days=3)


def test_extend_missing_deadline(now):
    assert extended_deadline(None, now) == now + timedelta(days=2)


@pytest.mark.parametrize("days", [0, -1])
def test_extend_rejects_non_positive(now, days):
    with pytest.raises(AccessInputError):
        extended_deadline(now, now, additional_days=days)


def test_naive_now_treated_as_utc(make_user, now):
    user = make_user(verification_deadline=now + timedelta(hours=20))
    naive_now = now.replace(tzinfo=None)

    assert days_remaining(user.verification_deadline, naive_now) == 1
    assert days_until_deactivation(user, naive_now) == 1


def test_extend_with_naive_now(now):
    naive_now = now.replace(tzinfo=None)
    extended = extended_deadline(now - timedelta(days=1), naive_now, additional_days=1)
    assert extended == now + timedelta(days=1)
    assert extended.tzinfo is UTC
