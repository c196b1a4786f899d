"""
Access component - Capability and verification status evaluation.

Answers what a user may do, whether the account is usable, and what the
user should be told about their verification progress.

Invariants:
- I1: Admins hold every capability and are never deactivated
- I2: Deactivated or suspended accounts hold no capability
- I3: Message rules are evaluated in a fixed order, first match wins
- I4: The clock is sampled once per evaluation
- I5: Unknown roles or statuses are reported, never defaulted
"""

from __future__ import annotations

from datetime import datetime

from src.domain.boundary import AccessInputError, parse_user_snapshot
from src.domain.deadlines import days_until_deactivation
from src.domain.entities import UserSnapshot
from src.domain.messages import describe
from src.domain.policy import AccessPolicy, is_deactivated
from src.rules.models import DEFAULT_RULES, AccessRules

from .models import (
    AccessEvaluation,
    CapabilityOutput,
    CheckCapabilityInput,
    DescribeInput,
    EvaluateByIdInput,
    EvaluateInput,
    EvaluationOutput,
    MessageOutput,
)
from .ports import TimePort, UserSourcePort


def evaluate_snapshot(
    user: UserSnapshot, now: datetime, rules: AccessRules = DEFAULT_RULES
) -> AccessEvaluation:
    """Evaluate an already validated snapshot against one instant."""
    policy = AccessPolicy()
    return AccessEvaluation(
        user=user,
        fully_verified=policy.is_fully_verified(user),
        deactivated=is_deactivated(user),
        capabilities=policy.capability_flags(user),
        message=describe(user, now, rules),
        days_until_deactivation=days_until_deactivation(user, now),
    )


def run_evaluate(
    inp: EvaluateInput, time: TimePort, rules: AccessRules = DEFAULT_RULES
) -> EvaluationOutput:
    try:
        user = parse_user_snapshot(inp.user)
    except AccessInputError as e:
        return EvaluationOutput(success=False, error=str(e))

    now = time.now_utc()
    return EvaluationOutput(evaluation=evaluate_snapshot(user, now, rules), success=True)


def run_evaluate_by_id(
    inp: EvaluateByIdInput,
    users: UserSourcePort,
    time: TimePort,
    rules: AccessRules = DEFAULT_RULES,
) -> EvaluationOutput:
    record = users.get_by_id(inp.user_id)
    if record is None:
        return EvaluationOutput(success=False, error="User not found")

    return run_evaluate(EvaluateInput(user=record), time, rules)


def run_describe(
    inp: DescribeInput, time: TimePort, rules: AccessRules = DEFAULT_RULES
) -> MessageOutput:
    try:
        user = parse_user_snapshot(inp.user)
    except AccessInputError as e:
        return MessageOutput(success=False, error=str(e))

    return MessageOutput(message=describe(user, time.now_utc(), rules), success=True)


def run_check_capability(inp: CheckCapabilityInput) -> CapabilityOutput:
    try:
        user = parse_user_snapshot(inp.user)
    except AccessInputError as e:
        return CapabilityOutput(capability=inp.capability, success=False, error=str(e))

    allowed = AccessPolicy().has_capability(user, inp.capability)
    return CapabilityOutput(capability=inp.capability, allowed=allowed, success=True)


def run(
    inp: EvaluateInput | EvaluateByIdInput | DescribeInput | CheckCapabilityInput,
    *,
    users: UserSourcePort | None = None,
    time: TimePort | None = None,
    rules: AccessRules = DEFAULT_RULES,
) -> EvaluationOutput | MessageOutput | CapabilityOutput:
    if isinstance(inp, EvaluateInput):
        assert time
        return run_evaluate(inp, time, rules)

    elif isinstance(inp, EvaluateByIdInput):
        assert users and time
        return run_evaluate_by_id(inp, users, time, rules)

    elif isinstance(inp, DescribeInput):
        assert time
        return run_describe(inp, time, rules)

    elif isinstance(inp, CheckCapabilityInput):
        return run_check_capability(inp)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
