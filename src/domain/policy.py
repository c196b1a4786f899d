from dataclasses import dataclass

from src.domain.entities import DEACTIVATED_STATUSES, Capability, UserSnapshot


@dataclass(frozen=True)
class CapabilitySet:
    """Feature flags derived for one user."""

    can_post_jobs: bool
    can_post_feed: bool
    can_message: bool
    can_accept_mentorship: bool


# --- Status facts ---

def is_admin(user: UserSnapshot) -> bool:
    return user.role == "admin"


def is_suspended(user: UserSnapshot) -> bool:
    return not is_admin(user) and user.account_status == "suspended"


def is_deactivated(user: UserSnapshot) -> bool:
    """Admins can never be deactivated."""
    if is_admin(user):
        return False
    return user.account_status in DEACTIVATED_STATUSES


def meets_verification(user: UserSnapshot) -> bool:
    """
    Verification requirement for the user's role, ignoring account status.

    Aspirants only need approval; students and alumni also need a verified
    admission number.
    """
    approved = user.verification_status == "approved"
    if user.role == "aspirant":
        return approved
    return approved and user.admission_verified


# Non-admin capability table; admin is an override, never a row
ROLE_CAPABILITIES: dict[str, frozenset[Capability]] = {
    "alumni": frozenset(
        {"full_verification", "post_jobs", "post_feed", "message", "accept_mentorship"}
    ),
    "student": frozenset({"full_verification", "post_feed", "message"}),
    "aspirant": frozenset({"full_verification", "post_feed", "message"}),
}


class AccessPolicy:
    def has_capability(self, user: UserSnapshot, capability: Capability) -> bool:
        """
        Resolve a capability for a user.

        Order of precedence:
        1. Admin override (always granted)
        2. Account status (deactivated accounts hold nothing)
        3. Role table (capability must be listed for the role)
        4. Verification requirement for the role
        """
        if is_admin(user):
            return True

        if is_deactivated(user):
            return False

        if capability not in ROLE_CAPABILITIES[user.role]:
            return False

        return meets_verification(user)

    def is_fully_verified(self, user: UserSnapshot) -> bool:
        if is_admin(user):
            return True
        return not is_deactivated(user) and meets_verification(user)

    def can_post_jobs(self, user: UserSnapshot) -> bool:
        return self.has_capability(user, "post_jobs")

    def can_post_feed(self, user: UserSnapshot) -> bool:
        return self.has_capability(user, "post_feed")

    def can_message(self, user: UserSnapshot) -> bool:
        return self.has_capability(user, "message")

    def can_accept_mentorship(self, user: UserSnapshot) -> bool:
        return self.has_capability(user, "accept_mentorship")

    def capability_flags(self, user: UserSnapshot) -> CapabilitySet:
        return CapabilitySet(
            can_post_jobs=self.can_post_jobs(user),
            can_post_feed=self.can_post_feed(user),
            can_message=self.can_message(user),
            can_accept_mentorship=self.can_accept_mentorship(user),
        )
