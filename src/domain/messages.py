"""
Verification status messages.

Messages are chosen by an ordered list of rules; the first rule whose
predicate holds wins. Several predicates can be true at once (a deactivated
student may also be fully approved), so the order of MESSAGE_RULES is part
of the behaviour, not just the conditions.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime

from src.domain.deadlines import days_remaining
from src.domain.entities import Severity, UserSnapshot
from src.rules.models import DEFAULT_RULES, AccessRules


@dataclass(frozen=True)
class VerificationMessage:
    message: str
    severity: Severity
    action: str | None = None
    rule: str = ""


@dataclass(frozen=True)
class MessageFacts:
    """Facts derived once per evaluation and shared by every rule."""

    user: UserSnapshot
    has_full_access: bool
    has_admission: bool
    is_pending: bool
    is_aspirant: bool
    days_remaining: int | None
    urgent_window_days: int

    @classmethod
    def derive(cls, user: UserSnapshot, now: datetime, rules: AccessRules) -> MessageFacts:
        deadline = user.verification_deadline
        return cls(
            user=user,
            has_full_access=user.verification_status == "approved",
            has_admission=user.admission_verified,
            is_pending=user.verification_status == "pending",
            is_aspirant=user.role == "aspirant",
            days_remaining=None if deadline is None else days_remaining(deadline, now),
            urgent_window_days=rules.deadlines.urgent_window_days,
        )


@dataclass(frozen=True)
class MessageRule:
    code: str
    applies: Callable[[MessageFacts], bool]
    outcome: Callable[[MessageFacts], VerificationMessage]


def _fixed(
    message: str, severity: Severity, action: str | None = None
) -> Callable[[MessageFacts], VerificationMessage]:
    def outcome(_: MessageFacts) -> VerificationMessage:
        return VerificationMessage(message=message, severity=severity, action=action)

    return outcome


def _urgent(f: MessageFacts) -> VerificationMessage:
    return VerificationMessage(
        message=(
            f"Urgent: Complete verification within {f.days_remaining} day(s) "
            "or your account will be deactivated"
        ),
        severity="warning",
        action="Verify Now",
    )


def _within_urgent_window(f: MessageFacts) -> bool:
    return f.days_remaining is not None and 0 < f.days_remaining <= f.urgent_window_days


FULLY_VERIFIED = "Your account is fully verified!"

MESSAGE_RULES: tuple[MessageRule, ...] = (
    MessageRule(
        "admin",
        lambda f: f.user.role == "admin",
        _fixed("Admin account - Full access enabled", "info"),
    ),
    MessageRule(
        "auto_deactivated",
        lambda f: f.user.account_status == "auto_deactivated",
        _fixed(
            "Your account has been deactivated due to incomplete verification. "
            "Complete verification to reactivate.",
            "error",
            "Complete Verification",
        ),
    ),
    MessageRule(
        "suspended",
        lambda f: f.user.account_status == "suspended",
        _fixed("Your account has been suspended. Contact admin for assistance.", "error"),
    ),
    MessageRule(
        "aspirant_verified",
        lambda f: f.is_aspirant and f.has_full_access,
        _fixed(FULLY_VERIFIED, "info"),
    ),
    MessageRule(
        "fully_verified",
        lambda f: f.has_full_access and f.has_admission,
        _fixed(FULLY_VERIFIED, "info"),
    ),
    MessageRule(
        "aspirant_pending",
        lambda f: f.is_aspirant and f.is_pending,
        _fixed(
            "Your email is verified. Your account is waiting for admin approval.",
            "warning",
            "View Status",
        ),
    ),
    MessageRule(
        "aspirant_unverified",
        lambda f: f.is_aspirant and not f.has_full_access,
        _fixed("Complete email verification to unlock all features", "warning", "Verify Email"),
    ),
    MessageRule(
        "pending_review",
        lambda f: f.is_pending and f.has_admission,
        _fixed(
            "Your admission number is verified. Your ID is pending admin review.",
            "warning",
            "View Status",
        ),
    ),
    MessageRule("deadline_urgent", _within_urgent_window, _urgent),
    MessageRule(
        "verification_missing",
        lambda f: not f.has_full_access and not f.has_admission,
        _fixed(
            "Complete ID card and admission number verification to unlock all features",
            "warning",
            "Verify Now",
        ),
    ),
    MessageRule(
        "id_pending",
        lambda f: not f.has_full_access,
        _fixed(
            "ID card verification pending review. Features unlock once an admin approves it.",
            "warning",
            "View Status",
        ),
    ),
    MessageRule(
        "admission_missing",
        lambda f: True,
        _fixed(
            "Add your admission number to unlock all features",
            "warning",
            "Add Admission Number",
        ),
    ),
)


def describe(
    user: UserSnapshot, now: datetime, rules: AccessRules = DEFAULT_RULES
) -> VerificationMessage:
    """Return the message for the first matching rule in MESSAGE_RULES."""
    facts = MessageFacts.derive(user, now, rules)
    for rule in MESSAGE_RULES:
        if rule.applies(facts):
            return replace(rule.outcome(facts), rule=rule.code)
    # The last rule always applies
    raise AssertionError("no message rule matched")
