"""
Sweep component - Plans the scheduled verification-deadline sweep.

Classifies stored accounts into those a job should deactivate and those it
should warn. Only plans are returned; applying them belongs to the job.

Invariants:
- I1: Admin accounts are never planned for deactivation or warning
- I2: Only active accounts are considered
- I3: Verified accounts are never planned, whatever their deadline
- I4: A warning is planned at most once (deactivation_warning_sent)
- I5: Invalid records are skipped and logged, never defaulted
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime, timedelta

from src.domain.boundary import AccessInputError, parse_user_snapshot
from src.domain.entities import UserSnapshot
from src.domain.policy import is_admin, meets_verification
from src.rules.models import DEFAULT_RULES, AccessRules

from .models import PendingSummary, PlanSweepInput, SkippedRecord, SummarizeInput, SweepPlan
from .ports import TimePort, UserSourcePort

logger = logging.getLogger(__name__)


def _load_snapshots(
    users: UserSourcePort,
    skipped: list[SkippedRecord],
    user_ids: list[str] | None = None,
) -> Iterator[UserSnapshot]:
    wanted = set(user_ids) if user_ids is not None else None
    for record in users.list_all():
        raw_id = record.get("id")
        user_id = str(raw_id) if raw_id is not None else None
        if wanted is not None and user_id not in wanted:
            continue
        try:
            yield parse_user_snapshot(record)
        except AccessInputError as e:
            logger.warning("Skipping user record %s: %s", user_id, e)
            skipped.append(SkippedRecord(user_id=user_id, reason=str(e)))


def _is_candidate(user: UserSnapshot) -> bool:
    return (
        not is_admin(user)
        and user.account_status == "active"
        and user.verification_deadline is not None
        and not meets_verification(user)
    )


def plan_sweep(
    snapshots: list[UserSnapshot], now: datetime, rules: AccessRules = DEFAULT_RULES
) -> SweepPlan:
    warn_until = now + timedelta(days=rules.deadlines.warning_window_days)
    to_deactivate: list[str] = []
    to_warn: list[str] = []

    for user in snapshots:
        if not _is_candidate(user):
            continue
        deadline = user.verification_deadline
        assert deadline is not None
        if deadline <= now:
            to_deactivate.append(user.id or "")
        elif deadline <= warn_until and not user.deactivation_warning_sent:
            to_warn.append(user.id or "")

    return SweepPlan(planned_at=now, to_deactivate=to_deactivate, to_warn=to_warn)


def run_plan_sweep(
    inp: PlanSweepInput,
    users: UserSourcePort,
    time: TimePort,
    rules: AccessRules = DEFAULT_RULES,
) -> SweepPlan:
    now = time.now_utc()
    skipped: list[SkippedRecord] = []
    snapshots = list(_load_snapshots(users, skipped, inp.user_ids))

    plan = plan_sweep(snapshots, now, rules)
    logger.info(
        "Sweep planned at %s: %d to deactivate, %d to warn, %d skipped",
        now.isoformat(),
        len(plan.to_deactivate),
        len(plan.to_warn),
        len(skipped),
    )
    return SweepPlan(
        planned_at=plan.planned_at,
        to_deactivate=plan.to_deactivate,
        to_warn=plan.to_warn,
        skipped=skipped,
    )


def run_summarize_pending(
    inp: SummarizeInput,
    users: UserSourcePort,
    time: TimePort,
) -> PendingSummary:
    now = time.now_utc()
    in_24h = now + timedelta(days=1)
    in_48h = now + timedelta(days=2)
    skipped: list[SkippedRecord] = []

    expiring_24h = expiring_48h = already_deactivated = 0
    for user in _load_snapshots(users, skipped):
        if user.account_status == "auto_deactivated":
            already_deactivated += 1
            continue
        if is_admin(user) or user.account_status != "active":
            continue
        deadline = user.verification_deadline
        if deadline is None:
            continue
        if now < deadline <= in_24h:
            expiring_24h += 1
        elif in_24h < deadline <= in_48h:
            expiring_48h += 1

    return PendingSummary(
        evaluated_at=now,
        expiring_24h=expiring_24h,
        expiring_48h=expiring_48h,
        already_deactivated=already_deactivated,
        skipped=len(skipped),
    )


def run(
    inp: PlanSweepInput | SummarizeInput,
    *,
    users: UserSourcePort,
    time: TimePort,
    rules: AccessRules = DEFAULT_RULES,
) -> SweepPlan | PendingSummary:
    if isinstance(inp, PlanSweepInput):
        return run_plan_sweep(inp, users, time, rules)

    elif isinstance(inp, SummarizeInput):
        return run_summarize_pending(inp, users, time)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
