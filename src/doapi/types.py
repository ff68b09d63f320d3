# doapi/types.py
"""Core type definitions shared by the dispatcher."""

from collections.abc import Mapping

import httpx
from pydantic import BaseModel, Field


class RequestData(BaseModel):
    """Everything needed to build the single HTTP request of one call."""

    method: str
    url: str
    params: Mapping[str, str] | None = None
    content: bytes | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = None

    def build_request(self) -> httpx.Request:
        """Builds an httpx.Request object from the stored data.

        Raises:
            httpx.InvalidURL: If `url` and `params` do not form a valid URL.
        """
        extensions = {}
        if self.timeout is not None:
            # httpx only honours the timeout extension on hand-built requests
            extensions["timeout"] = httpx.Timeout(self.timeout).as_dict()
        return httpx.Request(
            method=self.method,
            url=self.url,
            params=self.params,
            content=self.content,
            headers=self.headers,
            extensions=extensions,
        )
