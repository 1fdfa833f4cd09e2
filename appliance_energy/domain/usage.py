from __future__ import annotations

from .models import MAX_IN_PERIOD, Profile, State


def usage(profile: Profile, *, period: int = MAX_IN_PERIOD) -> int:
    """Minutes the appliance spent ON over one period.

    Each event closes the half-open interval ``[previous, timestamp)``; the
    last state runs until ``period``. Repeated states need no special
    handling since every event only moves the anchor forward.
    """
    if not profile.events:
        return period if profile.initial == State.ON else 0

    current_time = 0
    current_state = profile.initial
    energy_used = 0

    for event in profile.events:
        if current_state == State.ON:
            energy_used += event.timestamp - current_time

        current_state = event.state
        current_time = event.timestamp

    if current_state == State.ON:
        energy_used += period - current_time

    return energy_used
