from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

# Minutes in one period (a day).
MAX_IN_PERIOD = 1440

MIN_DAY = 1
MAX_DAY = 365


class State(str, Enum):
    ON = "on"
    OFF = "off"
    AUTO_OFF = "auto-off"  # switched off by the energy-saving device

    def __str__(self) -> str:
        return self.value


USAGE_STATES = frozenset({State.ON, State.OFF})
SAVINGS_STATES = frozenset({State.ON, State.OFF, State.AUTO_OFF})

# Raw values from outside stay unparsed until the validator has seen them.
StateLike = Union[State, str]


@dataclass(frozen=True)
class Event:
    timestamp: int
    state: StateLike

    def to_dict(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp, "state": str(self.state)}


@dataclass(frozen=True)
class Profile:
    initial: StateLike
    events: tuple[Event, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Profile":
        """Build a profile from the ``{initial, events: [{timestamp, state}]}`` record.

        No checking beyond the record shape happens here; call
        :func:`appliance_energy.domain.validation.validate` before reducing.
        """
        events = tuple(
            Event(timestamp=e["timestamp"], state=e["state"])
            for e in data.get("events", ())
        )
        return cls(initial=data["initial"], events=events)

    def to_dict(self) -> dict[str, Any]:
        return {
            "initial": str(self.initial),
            "events": [e.to_dict() for e in self.events],
        }
