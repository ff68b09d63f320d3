"""Bearer-token authentication for the DigitalOcean API."""

import httpx

from .log_config import logger


class BearerTokenAuth:
    """Adds ``Authorization: Bearer <token>`` to outgoing requests.

    Instances are immutable; replacing the credential means building a new
    `BearerTokenAuth` (see `DigitalOcean.update_api_token`).
    """

    def __init__(self, token: str | None):
        self._token: str = token or ""
        if not self._token:
            logger.warning(
                "BearerTokenAuth initialized without a token; requests will be unauthenticated."
            )
        else:
            logger.debug("BearerTokenAuth initialized.")

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Adds the 'Authorization: Bearer <token>' header to the request."""
        logger.trace("Authenticating request using BearerTokenAuth.")
        request.headers["Authorization"] = f"Bearer {self._token}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(has_token={self.has_token})"
