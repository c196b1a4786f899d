from pydantic import BaseModel, ConfigDict, Field


class DeadlineRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    grace_period_days: int = Field(default=2, gt=0)
    extension_days: int = Field(default=2, gt=0)
    urgent_window_days: int = Field(default=1, gt=0)
    warning_window_days: int = Field(default=1, gt=0)


class AccessRules(BaseModel):
    # Capabilities per role are fixed in src.domain.policy, not configurable
    model_config = ConfigDict(extra="forbid")

    deadlines: DeadlineRules = Field(default_factory=DeadlineRules)


DEFAULT_RULES = AccessRules()
