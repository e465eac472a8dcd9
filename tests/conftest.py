"""Setting up pytest fixtures for the tests."""

import json
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
from aioresponses import aioresponses

from pygaggiuino import GaggiuinoClient

BASE_URL = "http://gaggiuino.test"
API_URL = f"{BASE_URL}/api"


def load_fixture(device_type: str, file_name: str) -> Any:
    """Load a fixture."""
    with open(
        f"{Path(__file__).parent}/fixtures/{device_type}/{file_name}", encoding="utf-8"
    ) as f:
        return json.load(f)


def shot_payload(shot_id: int) -> dict[str, Any]:
    """Return the shot fixture with another id."""
    payload = load_fixture("machine", "shot.json")
    payload["id"] = shot_id
    return payload


@pytest.fixture(name="mock_aioresponse")
def fixture_mock_aioresponse() -> Generator[aioresponses, None, None]:
    """Fixture for aioresponses."""
    with aioresponses() as m:
        yield m


@pytest.fixture(name="client")
async def fixture_client() -> AsyncGenerator[GaggiuinoClient, None]:
    """Return a client pointing to the mocked machine."""
    async with GaggiuinoClient(BASE_URL) as client:
        yield client
