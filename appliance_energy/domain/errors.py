from __future__ import annotations
from typing import Any, Optional


class ProfileValidationError(ValueError):
    """Base for every rejection of a caller-supplied profile or day."""

    code = "invalid_profile"

    def __init__(self, message: str, *, value: Any = None, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value
        self.index = index  # position of the offending event, if any

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.index is not None:
            out["index"] = self.index
        return out


class InvalidDay(ProfileValidationError):
    code = "invalid_day"


class DayOutOfRange(ProfileValidationError):
    code = "day_out_of_range"


class InvalidInitialState(ProfileValidationError):
    code = "invalid_initial_state"


class InvalidTimestamp(ProfileValidationError):
    code = "invalid_timestamp"


class TimestampOutOfRange(ProfileValidationError):
    code = "timestamp_out_of_range"


class InvalidEventState(ProfileValidationError):
    code = "invalid_event_state"


class EventsOutOfOrder(ProfileValidationError):
    code = "events_out_of_order"
