"""
Access component - Capability checks and verification status messages.
"""

from .component import (
    evaluate_snapshot,
    run,
    run_check_capability,
    run_describe,
    run_evaluate,
    run_evaluate_by_id,
)
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

__all__ = [
    # Entry points
    "run",
    "run_check_capability",
    "run_describe",
    "run_evaluate",
    "run_evaluate_by_id",
    "evaluate_snapshot",
    # Input models
    "CheckCapabilityInput",
    "DescribeInput",
    "EvaluateByIdInput",
    "EvaluateInput",
    # Output models
    "AccessEvaluation",
    "CapabilityOutput",
    "EvaluationOutput",
    "MessageOutput",
    # Ports
    "TimePort",
    "UserSourcePort",
]
