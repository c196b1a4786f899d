from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

# --- Enums / Literals ---
RoleType = Literal["admin", "alumni", "student", "aspirant"]
AccountStatus = Literal["active", "auto_deactivated", "suspended"]
VerificationStatus = Literal["unverified", "pending", "approved"]
Capability = Literal[
    "full_verification", "post_jobs", "post_feed", "message", "accept_mentorship"
]
Severity = Literal["info", "warning", "error"]

DEACTIVATED_STATUSES: frozenset[str] = frozenset({"auto_deactivated", "suspended"})

# --- User ---

class UserSnapshot(BaseModel):
    """
    Read-only view of a user record at the moment of evaluation.

    Field names follow Python conventions; the camelCase names used by the
    document store are accepted as aliases. Absent or null optional fields
    resolve to their documented defaults here, once, so rules never
    re-derive them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str | None = None
    email: str | None = None
    role: RoleType
    account_status: AccountStatus = Field(default="active", alias="accountStatus")
    verification_status: VerificationStatus = Field(
        default="unverified", alias="verificationStatus"
    )
    admission_verified: StrictBool = Field(default=False, alias="admissionVerified")
    verification_deadline: datetime | None = Field(
        default=None, alias="verificationDeadline"
    )
    deactivation_warning_sent: StrictBool = Field(
        default=False, alias="deactivationWarningEmailSent"
    )

    @field_validator("account_status", mode="before")
    @classmethod
    def _default_account_status(cls, v: Any) -> Any:
        return "active" if v is None else v

    @field_validator("verification_status", mode="before")
    @classmethod
    def _default_verification_status(cls, v: Any) -> Any:
        return "unverified" if v is None else v

    @field_validator("admission_verified", "deactivation_warning_sent", mode="before")
    @classmethod
    def _default_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("verification_deadline", mode="after")
    @classmethod
    def _assume_utc(cls, v: datetime | None) -> datetime | None:
        # Naive timestamps from the store are UTC
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v
