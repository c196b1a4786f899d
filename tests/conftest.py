from datetime import UTC, datetime
from pathlib import Path

import pytest

from src.adapters.clock import FixedClock
from src.domain.entities import UserSnapshot
from src.domain.policy import AccessPolicy
from src.rules.loader import load_rules
from src.rules.models import AccessRules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock(now: datetime) -> FixedClock:
    return FixedClock(now)


@pytest.fixture
def rules() -> AccessRules:
    # Load the real rules file so the suite also checks it stays valid
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def policy() -> AccessPolicy:
    return AccessPolicy()


@pytest.fixture
def make_user():
    def _make(**fields) -> UserSnapshot:
        fields.setdefault("role", "student")
        return UserSnapshot(**fields)

    return _make
