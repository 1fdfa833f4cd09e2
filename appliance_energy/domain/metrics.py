"""Public energy metrics.

Each operation validates its input against the state alphabet it accepts,
then hands a parsed copy of the profile to the matching reducer. Profiles
are never mutated.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

from .day_slice import ordered_events, usage_for_day
from .errors import InvalidDay
from .models import SAVINGS_STATES, USAGE_STATES, Profile
from .savings import savings
from .usage import usage
from .validation import as_integer, coerce, validate

logger = logging.getLogger(__name__)


def _in_order(profile: Profile, sort_events: Optional[bool]) -> Profile:
    return Profile(initial=profile.initial, events=ordered_events(profile, sort_events))


def calculate_energy_usage_simple(profile: Profile, sort_events: Optional[bool] = None) -> int:
    """Minutes ON during a single day (ON/OFF profile, timestamps 0-1439).

    Events must be in non-decreasing timestamp order; see
    :func:`~appliance_energy.domain.day_slice.ordered_events`.
    """
    validate(USAGE_STATES, profile)
    result = usage(_in_order(coerce(profile), sort_events))
    logger.debug("usage: events=%d minutes=%d", len(profile.events), result)
    return result


def calculate_energy_savings(profile: Profile, sort_events: Optional[bool] = None) -> int:
    """Minutes saved by automatic shutoff during a single day (ON/OFF/AUTO_OFF profile)."""
    validate(SAVINGS_STATES, profile)
    result = savings(_in_order(coerce(profile), sort_events))
    logger.debug("savings: events=%d minutes=%d", len(profile.events), result)
    return result


def calculate_energy_usage_for_day(
    month_profile: Profile, day: Any, sort_events: Optional[bool] = None
) -> int:
    """Minutes ON during ``day`` of a profile whose timestamps count from the month start."""
    if day is None:
        raise InvalidDay("Day must be an integer", value=day)
    validate(USAGE_STATES, month_profile, day)
    result = usage_for_day(coerce(month_profile), as_integer(day), sort_events)
    logger.debug(
        "usage_for_day: day=%s events=%d minutes=%d", day, len(month_profile.events), result
    )
    return result
