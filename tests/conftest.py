from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from appliance_energy.domain.models import Event, Profile  # noqa: E402


def make_profile(initial, *events) -> Profile:
    """``make_profile("on", (50, "off"), (304, "on"))``"""
    return Profile(initial=initial, events=tuple(Event(timestamp=t, state=s) for t, s in events))


@pytest.fixture(autouse=True)
def _reset_logging_handlers():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_appliance_energy_handler", False):
            root.removeHandler(h)
            h.close()
