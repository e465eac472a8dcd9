"""Constants for the Gaggiuino local API."""

from __future__ import annotations

from enum import StrEnum

DEFAULT_BASE_URL = "http://gaggiuino.local"
DEFAULT_REQUEST_TIMEOUT = 5
DEFAULT_RESOURCE_TIMEOUT = 10
DEFAULT_RECENT_SHOTS = 10

API_PATH = "/api"

TRUE_TOKENS = frozenset({"true", "1", "yes"})
FALSE_TOKENS = frozenset({"false", "0", "no"})


class PhaseType(StrEnum):
    """Quantity a profile phase is targeting."""

    PRESSURE = "PRESSURE"
    FLOW = "FLOW"
