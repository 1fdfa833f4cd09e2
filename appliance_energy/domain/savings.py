"""Energy saved by automatic (device-triggered) shutoff.

Savings accrue from the moment the device switches the appliance off until
someone switches it back ON. A manual OFF reported while the device already
holds it off (or an AUTO_OFF reported while it is manually off) does not
change who switched it off, so such events neither move the anchor time nor
change the tracked state.
"""
from __future__ import annotations

from .models import MAX_IN_PERIOD, Profile, State, StateLike

INVALID_TRANSITIONS = frozenset({
    (State.AUTO_OFF, State.OFF),
    (State.OFF, State.AUTO_OFF),
})


def is_invalid_transition(from_state: StateLike, to_state: StateLike) -> bool:
    return (State(from_state), State(to_state)) in INVALID_TRANSITIONS


def savings(profile: Profile, *, period: int = MAX_IN_PERIOD) -> int:
    if not profile.events:
        return period if profile.initial == State.AUTO_OFF else 0

    current_time = 0
    current_state = profile.initial
    energy_saved = 0

    for event in profile.events:
        # Uses the state before this event is applied
        if current_state == State.AUTO_OFF and event.state == State.ON:
            energy_saved += event.timestamp - current_time

        if event.state != current_state and not is_invalid_transition(current_state, event.state):
            current_state = event.state
            current_time = event.timestamp

    if current_state == State.AUTO_OFF:
        energy_saved += period - current_time

    return energy_saved
