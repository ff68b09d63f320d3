"""Shared fixtures for the doapi test suite."""

from typing import Any

import pytest
import pytest_asyncio

from doapi.client import DigitalOcean
from doapi.config import DOSettings

API = "https://api.digitalocean.com/v2"


@pytest.fixture
def settings() -> DOSettings:
    """Settings independent of the environment and any .env file."""
    return DOSettings(_env_file=None, api_token="test-token")


@pytest_asyncio.fixture
async def client(settings: DOSettings):
    async with DigitalOcean(settings=settings) as do:
        yield do


def image_json(image_id: int = 7555620, **overrides: Any) -> dict[str, Any]:
    """Wire representation of an image, as the API returns it."""
    data = {
        "id": image_id,
        "name": "Nifty New Snapshot",
        "type": "snapshot",
        "distribution": "Ubuntu",
        "slug": None,
        "public": False,
        "regions": ["nyc2", "nyc3"],
        "created_at": "2014-11-04T22:23:02Z",
        "min_disk_size": 20,
        "size_gigabytes": 2.34,
    }
    data.update(overrides)
    return data


def action_json(action_id: int = 72531856, **overrides: Any) -> dict[str, Any]:
    data = {
        "id": action_id,
        "status": "completed",
        "type": "assign",
        "started_at": "2015-11-12T17:51:03Z",
        "completed_at": "2015-11-12T17:51:14Z",
        "resource_id": 758604968,
        "resource_type": "floating_ip",
        "region": {
            "name": "New York 3",
            "slug": "nyc3",
            "sizes": ["s-1vcpu-1gb"],
            "features": ["private_networking", "backups"],
            "available": True,
        },
        "region_slug": "nyc3",
    }
    data.update(overrides)
    return data
