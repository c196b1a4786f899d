"""
Sweep component - Deactivation sweep planning.
"""

from .component import plan_sweep, run, run_plan_sweep, run_summarize_pending
from .models import PendingSummary, PlanSweepInput, SkippedRecord, SummarizeInput, SweepPlan
from .ports import TimePort, UserSourcePort

__all__ = [
    # Entry points
    "run",
    "run_plan_sweep",
    "run_summarize_pending",
    "plan_sweep",
    # Input models
    "PlanSweepInput",
    "SummarizeInput",
    # Output models
    "PendingSummary",
    "SkippedRecord",
    "SweepPlan",
    # Ports
    "TimePort",
    "UserSourcePort",
]
