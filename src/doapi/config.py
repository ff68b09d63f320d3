# doapi/config.py
from functools import lru_cache

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DIGITALOCEAN_API_BASE_URL = "https://api.digitalocean.com/v2/"


class DOSettings(BaseSettings):
    """
    Settings for the DigitalOcean client, loaded from environment variables
    (prefixed with ``DOAPI_``) or from a .env / secrets.env file.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="DOAPI_",
        extra="ignore",
        case_sensitive=False,
    )

    api_token: str = Field(
        default="", description="Personal access token sent as a Bearer credential"
    )
    base_url: str = Field(
        default=DIGITALOCEAN_API_BASE_URL,
        description="API origin every descriptor path is appended to",
    )
    request_timeout: float = Field(
        default=60.0, gt=0, description="Per-request timeout in seconds"
    )
    user_agent: str = Field(
        default="doapi/0.1.0",
        description="User-Agent header for requests",
    )
    max_pages: int | None = Field(
        default=None,
        ge=1,
        description="Upper bound on pages fetched by one paginated call (None = unbounded)",
    )

    @field_validator("base_url")
    @classmethod
    def require_absolute_http_url(cls, value: str) -> str:
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"base_url is not a valid URL: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"base_url must be an absolute http(s) URL, got {value!r}")
        return value


@lru_cache
def get_settings() -> DOSettings:
    """
    Provides access to the client settings.

    Settings are loaded from environment variables or .env/secrets.env files.
    The instance is cached for performance.

    Returns:
        DOSettings: The settings instance.
    """
    return DOSettings()
