"""Tests for DOSettings."""

import pytest
from pydantic import ValidationError

from doapi.config import DIGITALOCEAN_API_BASE_URL, DOSettings


def test_defaults():
    settings = DOSettings(_env_file=None)

    assert settings.base_url == DIGITALOCEAN_API_BASE_URL
    assert settings.request_timeout == 60.0
    assert settings.max_pages is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DOAPI_API_TOKEN", "env-token")
    monkeypatch.setenv("DOAPI_REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("DOAPI_MAX_PAGES", "3")

    settings = DOSettings(_env_file=None)

    assert settings.api_token == "env-token"
    assert settings.request_timeout == 12.5
    assert settings.max_pages == 3


@pytest.mark.parametrize("field", [{"request_timeout": 0}, {"max_pages": 0}])
def test_rejects_non_positive_values(field):
    with pytest.raises(ValidationError):
        DOSettings(_env_file=None, **field)


@pytest.mark.parametrize(
    "base_url", ["api.digitalocean.com/v2", "/v2/", "ftp://api.digitalocean.com/v2/"]
)
def test_rejects_base_url_without_http_scheme_and_host(base_url):
    with pytest.raises(ValidationError):
        DOSettings(_env_file=None, base_url=base_url)


def test_accepts_http_base_url():
    settings = DOSettings(_env_file=None, base_url="http://localhost:8080/v2")

    assert settings.base_url == "http://localhost:8080/v2"
