from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Any, Literal, List

from ..domain.models import Event, Profile

# Field values pass through uncoerced; the domain validator owns integrality
# and state membership. Only the record shape is enforced here.


class EventIn(BaseModel):
    timestamp: Any
    state: Any


class ProfileIn(BaseModel):
    initial: Any
    events: List[EventIn] = Field(default_factory=list)

    def to_domain(self) -> Profile:
        return Profile(
            initial=self.initial,
            events=tuple(Event(timestamp=e.timestamp, state=e.state) for e in self.events),
        )


class DayUsageRequest(BaseModel):
    profile: ProfileIn
    day: Any


class MetricResponse(BaseModel):
    metric: Literal["usage", "savings"]
    minutes: int


class DayMetricResponse(MetricResponse):
    day: int


class PeriodResponse(BaseModel):
    minutes_per_period: int
    min_day: int
    max_day: int
