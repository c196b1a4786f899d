import itertools

import pytest

from src.domain.policy import (
    ROLE_CAPABILITIES,
    AccessPolicy,
    CapabilitySet,
    is_deactivated,
    is_suspended,
    meets_verification,
)

ACCOUNT_STATUSES = ["active", "auto_deactivated", "suspended"]
VERIFICATION_STATUSES = ["unverified", "pending", "approved"]
PREDICATES = [
    "is_fully_verified",
    "can_post_jobs",
    "can_post_feed",
    "can_message",
    "can_accept_mentorship",
]


@pytest.mark.parametrize(
    "account_status,verification_status,admission_verified",
    list(itertools.product(ACCOUNT_STATUSES, VERIFICATION_STATUSES, [True, False])),
)
def test_admin_override(policy, make_user, account_status, verification_status, admission_verified):
    admin = make_user(
        role="admin",
        account_status=account_status,
        verification_status=verification_status,
        admission_verified=admission_verified,
    )
    for name in PREDICATES:
        assert getattr(policy, name)(admin) is True, name
    assert is_deactivated(admin) is False
    assert is_suspended(admin) is False


@pytest.mark.parametrize("status", VERIFICATION_STATUSES)
def test_aspirant_ignores_admission(policy, make_user, status):
    with_admission = make_user(role="aspirant", verification_status=status, admission_verified=True)
    without = make_user(role="aspirant", verification_status=status, admission_verified=False)

    assert policy.is_fully_verified(with_admission) == policy.is_fully_verified(without)
    assert policy.is_fully_verified(without) == (status == "approved")


@pytest.mark.parametrize("role", ["student", "alumni"])
@pytest.mark.parametrize(
    "status,admission,expected",
    [
        ("approved", True, True),
        ("approved", False, False),
        ("pending", True, False),
        ("unverified", False, False),
    ],
)
def test_student_alumni_need_both(policy, make_user, role, status, admission, expected):
    user = make_user(role=role, verification_status=status, admission_verified=admission)
    assert policy.is_fully_verified(user) is expected
    assert meets_verification(user) is expected


@pytest.mark.parametrize("role", ["student", "alumni", "aspirant"])
@pytest.mark.parametrize("account_status", ["auto_deactivated", "suspended"])
def test_deactivation_dominates(policy, make_user, role, account_status):
    user = make_user(
        role=role,
        account_status=account_status,
        verification_status="approved",
        admission_verified=True,
    )
    assert is_deactivated(user) is True
    for name in PREDICATES:
        assert getattr(policy, name)(user) is False, name


def test_suspended_flag(make_user):
    assert is_suspended(make_user(account_status="suspended")) is True
    assert is_suspended(make_user(account_status="auto_deactivated")) is False


@pytest.mark.parametrize("role", ["student", "aspirant"])
def test_jobs_and_mentorship_are_alumni_only(policy, make_user, role):
    user = make_user(role=role, verification_status="approved", admission_verified=True)

    assert policy.is_fully_verified(user) is True
    assert policy.can_post_feed(user) is True
    assert policy.can_message(user) is True
    assert policy.can_post_jobs(user) is False
    assert policy.can_accept_mentorship(user) is False


def test_verified_alumni_has_everything(policy, make_user):
    alumni = make_user(role="alumni", verification_status="approved", admission_verified=True)
    assert policy.capability_flags(alumni) == CapabilitySet(
        can_post_jobs=True,
        can_post_feed=True,
        can_message=True,
        can_accept_mentorship=True,
    )


def test_unverified_alumni_has_nothing(policy, make_user):
    alumni = make_user(role="alumni", verification_status="pending", admission_verified=True)
    flags = policy.capability_flags(alumni)
    assert not any(
        [flags.can_post_jobs, flags.can_post_feed, flags.can_message, flags.can_accept_mentorship]
    )


def test_role_table_is_fixed():
    assert set(ROLE_CAPABILITIES) == {"alumni", "student", "aspirant"}
    for role, capabilities in ROLE_CAPABILITIES.items():
        assert {"full_verification", "post_feed", "message"} <= capabilities
        if role != "alumni":
            assert "post_jobs" not in capabilities
            assert "accept_mentorship" not in capabilities


def test_rules_file_cannot_change_capabilities(policy, make_user, rules):
    student = make_user(role="student", verification_status="approved", admission_verified=True)
    aspirant = make_user(role="aspirant", verification_status="approved")

    assert "access" not in rules.model_dump()
    assert policy.is_fully_verified(student) is True
    assert policy.can_post_jobs(student) is False
    assert policy.is_fully_verified(aspirant) is True
