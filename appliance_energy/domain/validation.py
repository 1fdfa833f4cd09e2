"""Boundary checks for caller-supplied profiles.

Every public operation runs :func:`validate` with its own state alphabet
before any reduction happens. The first violation found aborts the call:
the day is checked first, then the initial state, then each event in order.
"""
from __future__ import annotations
from typing import AbstractSet, Any, Optional

from .errors import (
    DayOutOfRange,
    InvalidDay,
    InvalidEventState,
    InvalidInitialState,
    InvalidTimestamp,
    TimestampOutOfRange,
)
from .models import MAX_DAY, MAX_IN_PERIOD, MIN_DAY, Event, Profile, State


def as_integer(value: Any) -> Optional[int]:
    """Return ``value`` as an int if it is integral, else None.

    Integral floats such as ``2.0`` are accepted since JSON decoders produce
    them; bools are not numbers here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _allowed(state: Any, allowed_states: AbstractSet[State]) -> bool:
    # Linear scan: raw input may be unhashable (e.g. a JSON list).
    return any(state == s for s in allowed_states)


def validate(allowed_states: AbstractSet[State], profile: Profile, day: Any = None) -> None:
    if day is not None:
        d = as_integer(day)
        if d is None:
            raise InvalidDay("Day must be an integer", value=day)
        if d < MIN_DAY or d > MAX_DAY:
            raise DayOutOfRange("Input day out of range", value=day)

    if not _allowed(profile.initial, allowed_states):
        raise InvalidInitialState(
            f"Invalid initial state: {profile.initial}", value=profile.initial
        )

    for index, event in enumerate(profile.events):
        ts = as_integer(event.timestamp)
        if ts is None or ts < 0:
            raise InvalidTimestamp(
                f"Invalid timestamp: {event.timestamp}", value=event.timestamp, index=index
            )

        # Only a single-day profile is bounded by the period length
        if day is None and ts >= MAX_IN_PERIOD:
            raise TimestampOutOfRange(
                f"Timestamp exceeds daily range: {event.timestamp}", value=event.timestamp, index=index
            )

        if not _allowed(event.state, allowed_states):
            raise InvalidEventState(
                f"Invalid event state: {event.state}", value=event.state, index=index
            )


def coerce(profile: Profile) -> Profile:
    """Return a copy of an already validated profile with parsed states and int timestamps."""
    return Profile(
        initial=State(profile.initial),
        events=tuple(
            Event(timestamp=as_integer(e.timestamp), state=State(e.state))
            for e in profile.events
        ),
    )
