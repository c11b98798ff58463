from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ValidationOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    reason: Optional[str] = None

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationOutcome":
        return cls(is_valid=False, reason=reason)


class VerificationResult(BaseModel):
    """
    Outcome of parsing a webhook delivery.

    Exactly one of ``event`` (valid deliveries) or ``error`` (rejected
    deliveries) is set, and ``is_valid`` always agrees with which one.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    event: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one(self):
        if self.is_valid and (self.event is None or self.error is not None):
            raise ValueError("a valid result carries an event and no error")
        if not self.is_valid and (self.error is None or self.event is not None):
            raise ValueError("an invalid result carries an error and no event")
        return self

    @classmethod
    def accepted(cls, event: dict[str, Any]) -> "VerificationResult":
        return cls(is_valid=True, event=event)

    @classmethod
    def rejected(cls, error: str) -> "VerificationResult":
        return cls(is_valid=False, error=error)

    @property
    def event_type(self) -> Optional[str]:
        if self.event is None:
            return None
        return self.event.get("event")
