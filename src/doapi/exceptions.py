"""Exception classes raised by the doapi client.

Every failure of a dispatched call surfaces as exactly one subclass of
`DOError`. Paginated calls wrap that error in a `PaginationError` so the pages
fetched before the failure are not lost.
"""

from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from .descriptors import RemoteErrorDetail


class DOError(Exception):
    """Base exception class for all doapi errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            url_info = getattr(getattr(self.response, "request", None), "url", "N/A")
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class RemoteError(DOError):
    """The API rejected the request and explained why.

    Raised for 4xx/5xx responses whose body decodes as `{"id", "message"}`.

    Attributes:
        detail: The decoded error body, with `status` set to the observed code.
    """

    def __init__(
        self,
        detail: "RemoteErrorDetail",
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        self.detail = detail
        super().__init__(detail.describe(), response=response, request=request)

    @property
    def status_code(self) -> int | None:
        return self.detail.status


class InvalidEndpointError(DOError):
    """The descriptor produced a URL that cannot be built."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Invalid endpoint: {endpoint!r}")


class ErrorStatusCodeError(DOError):
    """A 4xx/5xx response whose body is not a recognisable API error."""

    def __init__(self, status_code: int, *, response: httpx.Response | None = None):
        self.status_code = status_code
        super().__init__(
            f"API request failed with status {status_code}", response=response
        )


class UnacceptableStatusCodeError(DOError):
    """A response outside both the success (2xx) and error (4xx/5xx) ranges."""

    def __init__(self, status_code: int, *, response: httpx.Response | None = None):
        self.status_code = status_code
        super().__init__(
            f"Unacceptable response status {status_code}", response=response
        )


class EncodeError(DOError):
    """The request body could not be serialized to JSON."""

    def __init__(self, target_type: type[Any], reason: str | None = None):
        self.target_type = target_type
        message = f"Failed to encode body of type {target_type.__name__}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DecodeError(DOError):
    """The response body did not match the declared response shape.

    The underlying validation error is chained as ``__cause__``.
    """

    def __init__(
        self,
        target_type: type[Any],
        reason: str | None = None,
        *,
        response: httpx.Response | None = None,
    ):
        self.target_type = target_type
        message = f"Failed to decode body as {target_type.__name__}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, response=response)


class MissingBodyError(DOError):
    """A successful response that should carry a body arrived without one."""

    def __init__(self, *, response: httpx.Response | None = None):
        super().__init__("Response body is missing", response=response)


class TransportError(DOError):
    """No HTTP response was obtained (DNS, connection, TLS, timeout, ...)."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class TimeoutError(TransportError):
    """The request did not complete within the configured timeout."""


class NetworkError(TransportError):
    """A connection to the server could not be established or was lost."""


class PageLimitExceededError(DOError):
    """More pages were offered than `DOSettings.max_pages` allows."""

    def __init__(self, max_pages: int):
        self.max_pages = max_pages
        super().__init__(
            f"Pagination stopped after {max_pages} pages; the API still reports a next page"
        )


class PaginationError(DOError):
    """A paginated call failed part way.

    Attributes:
        pages: Responses decoded before the failing page, in page order. Empty
            when the very first page failed.
        error: The error that stopped pagination.
    """

    def __init__(self, error: DOError, pages: list[Any]):
        self.error = error
        self.pages = pages
        super().__init__(
            f"Pagination failed after {len(pages)} page(s): {error}",
            response=error.response,
            request=error.request,
        )


class PaginationContractError(RuntimeError):
    """A `next` link lacks the `page`/`per_page` parameters the API guarantees.

    Not a `DOError`: it signals a broken server contract or a bug and is never
    wrapped into `PaginationError`.
    """
