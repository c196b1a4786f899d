"""
Access component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.domain.entities import Capability, UserSnapshot
from src.domain.messages import VerificationMessage
from src.domain.policy import CapabilitySet

UserInput = UserSnapshot | Mapping[str, Any]


# --- Input Models ---


@dataclass(frozen=True)
class EvaluateInput:
    """Input for a full access evaluation of one user."""

    user: UserInput


@dataclass(frozen=True)
class EvaluateByIdInput:
    """Input for evaluating a stored user by id."""

    user_id: str


@dataclass(frozen=True)
class DescribeInput:
    """Input for the verification status message only."""

    user: UserInput


@dataclass(frozen=True)
class CheckCapabilityInput:
    """Input for a single capability check."""

    user: UserInput
    capability: Capability


# --- Output Models ---


@dataclass(frozen=True)
class AccessEvaluation:
    """Everything the presentation layer needs about one user."""

    user: UserSnapshot
    fully_verified: bool
    deactivated: bool
    capabilities: CapabilitySet
    message: VerificationMessage
    days_until_deactivation: int | None


@dataclass(frozen=True)
class EvaluationOutput:
    evaluation: AccessEvaluation | None = None
    success: bool = False
    error: str | None = None


@dataclass(frozen=True)
class MessageOutput:
    message: VerificationMessage | None = None
    success: bool = False
    error: str | None = None


@dataclass(frozen=True)
class CapabilityOutput:
    capability: Capability
    allowed: bool = False
    success: bool = False
    error: str | None = None
