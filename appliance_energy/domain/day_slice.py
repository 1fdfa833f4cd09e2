from __future__ import annotations
import logging
from operator import attrgetter
from typing import Optional

from ..core.config import settings
from .errors import EventsOutOfOrder
from .models import MAX_IN_PERIOD, Event, Profile, StateLike
from .usage import usage

logger = logging.getLogger(__name__)


def ordered_events(profile: Profile, sort_events: Optional[bool] = None) -> tuple[Event, ...]:
    """Events in non-decreasing timestamp order.

    Out-of-order input is sorted (stable) when ``sort_events`` is true and
    rejected with :class:`EventsOutOfOrder` otherwise. ``None`` defers to
    ``settings.sort_month_events``.
    """
    if sort_events is None:
        sort_events = settings.sort_month_events

    events = profile.events
    for index in range(1, len(events)):
        if events[index].timestamp < events[index - 1].timestamp:
            if sort_events:
                logger.debug("Sorting %d out-of-order events", len(events))
                return tuple(sorted(events, key=attrgetter("timestamp")))
            raise EventsOutOfOrder(
                f"Event timestamps must be non-decreasing: {events[index].timestamp} "
                f"follows {events[index - 1].timestamp}",
                value=events[index].timestamp,
                index=index,
            )
    return events


def state_at(profile: Profile, offset: int) -> StateLike:
    """State in effect at ``offset``: that of the last event strictly before it."""
    state = profile.initial
    for event in profile.events:
        if event.timestamp >= offset:
            break
        state = event.state
    return state


def slice_day(profile: Profile, day: int, sort_events: Optional[bool] = None) -> Profile:
    """Single-day profile for ``day`` (1-based), timestamps re-based to the day start."""
    events = ordered_events(profile, sort_events)
    source = Profile(initial=profile.initial, events=events)

    start_of_day = (day - 1) * MAX_IN_PERIOD
    end_of_day = day * MAX_IN_PERIOD

    day_events = tuple(
        Event(timestamp=e.timestamp - start_of_day, state=e.state)
        for e in events
        if start_of_day <= e.timestamp < end_of_day
    )
    return Profile(initial=state_at(source, start_of_day), events=day_events)


def usage_for_day(profile: Profile, day: int, sort_events: Optional[bool] = None) -> int:
    return usage(slice_day(profile, day, sort_events))
