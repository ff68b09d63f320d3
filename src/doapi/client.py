"""Asynchronous client for the DigitalOcean v2 API.

This module provides the `DigitalOcean` class, which turns any request
descriptor into an HTTP exchange, classifies the outcome and decodes the
typed result. List endpoints are walked page by page through their
``links.pages.next`` URLs until every page has been collected.
"""

import ssl
from collections import Counter
from collections.abc import AsyncIterator, Mapping
from http import HTTPStatus
from typing import Any, NamedTuple, Self, TypeVar

import certifi
import httpx
from pydantic import ValidationError

from .auth import BearerTokenAuth
from .codec import decode_body, encode_body
from .config import DOSettings, get_settings
from .descriptors import (
    NULL,
    DONull,
    DOPagedRequest,
    DOPagedResponse,
    DORequest,
    RemoteErrorDetail,
)
from .exceptions import (
    DecodeError,
    DOError,
    ErrorStatusCodeError,
    InvalidEndpointError,
    MissingBodyError,
    NetworkError,
    PageLimitExceededError,
    PaginationContractError,
    PaginationError,
    RemoteError,
    TimeoutError,
    TransportError,
    UnacceptableStatusCodeError,
)
from .log_config import logger
from .types import RequestData

ResponseT = TypeVar("ResponseT")
PagedResponseT = TypeVar("PagedResponseT", bound=DOPagedResponse)


class _Session(NamedTuple):
    """The credential and HTTP client a call is issued with."""

    auth: BearerTokenAuth
    http_client: httpx.AsyncClient


class DigitalOcean:
    """Asynchronous DigitalOcean API client.

    Every call captures the current credential/HTTP client pair when it is
    issued, so `update_api_token` only affects calls started after it
    returns. No responses are cached and failed calls are never retried.

    Example:
    ```python
    async with DigitalOcean("dop_v1_...") as do:
        image = await do.request(GetImage(id=7555620))
        every_page = await do.request_all(ListImages(per_page=50))
    ```

    Attributes:
        _settings: Configuration settings for the client.
        _base_url: The base URL every descriptor path is appended to.
        _session: The active credential/HTTP client pair.
        _owned_clients: Open HTTP clients created by this instance.
        _in_flight: Number of unfinished calls per HTTP client.
        _retired: Owned clients replaced by `update_api_token` that still
            have calls in flight; each is closed when its last call finishes.
    """

    def __init__(
        self,
        api_token: str | None = None,
        *,
        settings: DOSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            api_token: Personal access token. Falls back to `settings.api_token`.
            settings: Client settings. Loaded with `get_settings()` if omitted.
            http_client: Optional pre-configured httpx.AsyncClient. It is not
                closed by `aclose`.
        """
        self._settings = settings or get_settings()
        self._base_url: str = self._settings.base_url.rstrip("/")
        self._owned_clients: list[httpx.AsyncClient] = []
        self._in_flight: Counter[httpx.AsyncClient] = Counter()
        self._retired: set[httpx.AsyncClient] = set()

        token = api_token if api_token is not None else self._settings.api_token
        self._session = _Session(
            auth=BearerTokenAuth(token),
            http_client=http_client or self._create_default_http_client(),
        )
        logger.debug(f"DigitalOcean client initialized for {self._base_url}")

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create an httpx.AsyncClient verified against certifi's CA bundle."""
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        client = httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            verify=ssl_context,
            headers={"User-Agent": self._settings.user_agent},
            follow_redirects=False,
        )
        self._owned_clients.append(client)
        return client

    @property
    def has_token(self) -> bool:
        """Whether a non-empty API token is configured."""
        return self._session.auth.has_token

    async def update_api_token(
        self, new_token: str, *, http_client: httpx.AsyncClient | None = None
    ) -> None:
        """Replace the bearer token and start a fresh HTTP session.

        Calls already in flight finish with the token and session they were
        issued with. The replaced client, if this instance created it, is
        closed right away when idle, otherwise as soon as its last call
        finishes.

        Args:
            new_token: The new personal access token.
            http_client: Optional client to use instead of a fresh default one.
        """
        replaced = self._session.http_client
        self._session = _Session(
            auth=BearerTokenAuth(new_token),
            http_client=http_client or self._create_default_http_client(),
        )
        logger.info("API token updated; new HTTP session created.")

        if replaced is self._session.http_client or replaced not in self._owned_clients:
            return
        if self._in_flight[replaced]:
            logger.debug(
                f"Replaced HTTP client has {self._in_flight[replaced]} call(s) in flight; "
                "closing it once they finish."
            )
            self._retired.add(replaced)
        else:
            await self._close_owned_client(replaced)

    async def _close_owned_client(self, client: httpx.AsyncClient) -> None:
        self._owned_clients.remove(client)
        self._retired.discard(client)
        await client.aclose()
        logger.debug("Closed replaced HTTP client.")

    async def _release(self, client: httpx.AsyncClient) -> None:
        self._in_flight[client] -= 1
        if self._in_flight[client] > 0:
            return
        del self._in_flight[client]
        if client in self._retired:
            await self._close_owned_client(client)

    def _endpoint(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def send(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, str] | None = None,
        body: bytes | None = None,
        response_model: type[ResponseT],
    ) -> ResponseT | DONull:
        """Perform exactly one HTTP exchange and decode its outcome.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH).
            path: Path relative to the API base URL.
            query: Query parameters to attach to the URL.
            body: Pre-serialized JSON body, if any.
            response_model: Pydantic model to decode a successful body into,
                or `DONull` when no body is expected.

        Returns:
            The decoded response, or `NULL` for `DONull` targets and 204 responses.

        Raises:
            InvalidEndpointError: If the URL cannot be built.
            TransportError: If no response was received.
            RemoteError: For 4xx/5xx responses carrying an API error body.
            ErrorStatusCodeError: For other 4xx/5xx responses.
            UnacceptableStatusCodeError: For responses outside 2xx, 4xx and 5xx.
            MissingBodyError: If a body was expected but the response had none.
            DecodeError: If the body does not match `response_model`.
        """
        session = self._session

        headers = {
            "Accept": "application/json",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
            "User-Agent": self._settings.user_agent,
        }
        if body is not None:
            headers["Content-Type"] = "application/json"

        request_data = RequestData(
            method=method.upper(),
            url=self._endpoint(path),
            params=dict(query) if query else None,
            content=body,
            headers=headers,
            timeout=self._settings.request_timeout,
        )
        try:
            request = request_data.build_request()
        except httpx.InvalidURL as e:
            logger.error(f"Cannot build URL for {request_data.url!r}: {e}")
            raise InvalidEndpointError(request_data.url) from e
        if request.url.scheme not in ("http", "https") or not request.url.host:
            logger.error(f"Endpoint {request_data.url!r} is not an absolute http(s) URL")
            raise InvalidEndpointError(request_data.url)

        await session.auth.async_authenticate(request)

        logger.debug(f"Sending request: {request.method} {request.url}")
        if request.content:
            logger.trace(f"Request Body: {request.content.decode(errors='replace')}")

        self._in_flight[session.http_client] += 1
        try:
            response = await session.http_client.send(request)
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {request.url}")
            raise TimeoutError("Request timed out", request=request) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {request.url}: {e}")
            raise NetworkError(
                f"Network error for {request.url}: {e}", request=request
            ) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {request.url}: {e}")
            raise TransportError(
                f"HTTP request error for {request.url}: {e}", request=request
            ) from e
        finally:
            await self._release(session.http_client)

        logger.debug(f"Received response: {response.status_code} for {request.url}")
        return self._handle_response(response, response_model)

    def _handle_response(
        self, response: httpx.Response, response_model: type[ResponseT]
    ) -> ResponseT | DONull:
        status = response.status_code

        if status >= HTTPStatus.BAD_REQUEST:
            try:
                detail = RemoteErrorDetail.model_validate_json(response.content)
            except ValidationError as e:
                logger.error(f"Request failed with status {status}; body is not an API error")
                raise ErrorStatusCodeError(status, response=response) from e
            detail = detail.model_copy(update={"status": status})
            logger.warning(f"API returned an error: {detail.describe()}")
            raise RemoteError(detail, response=response)

        if not HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES:
            logger.error(f"Unacceptable status code {status} for {response.request.url}")
            raise UnacceptableStatusCodeError(status, response=response)

        if response_model is DONull or status == HTTPStatus.NO_CONTENT:
            return NULL

        if not response.content:
            logger.error(f"Missing body in {status} response for {response.request.url}")
            raise MissingBodyError(response=response)

        try:
            return decode_body(response_model, response.content)  # type: ignore[type-var]
        except DecodeError as e:
            logger.warning(
                f"Response model validation failed for {response.request.url}: {e.__cause__}"
            )
            e.response = response
            raise

    async def request(self, descriptor: DORequest[ResponseT]) -> ResponseT | DONull:
        """Execute one request descriptor.

        Encodes the descriptor's body (if any) and dispatches it with `send`.

        Raises:
            EncodeError: If the body cannot be serialized.
            DOError: Any of the errors documented on `send`.
        """
        body = descriptor.body
        content = None
        if body is not None and not isinstance(body, DONull):
            content = encode_body(body)

        return await self.send(
            descriptor.method,
            descriptor.path,
            query=descriptor.query,
            body=content,
            response_model=descriptor.response_model,
        )

    async def iterate_pages(
        self, descriptor: DOPagedRequest[PagedResponseT]
    ) -> AsyncIterator[PagedResponseT]:
        """Yield every page of a paginated endpoint, in order.

        Page N+1 is only requested after page N has been decoded, since its
        page parameters come from page N's ``next`` link.

        Raises:
            DOError: The first error hit; earlier pages have already been yielded.
            PageLimitExceededError: If `DOSettings.max_pages` pages were fetched
                and the API still reports a next page.
            PaginationContractError: If a next link lacks its page parameters.
        """
        max_pages = self._settings.max_pages
        current = descriptor
        fetched = 0

        while True:
            page = await self.request(current)
            fetched += 1
            yield page  # type: ignore[misc]

            next_link = page.links.next if isinstance(page, DOPagedResponse) else None
            if not next_link:
                logger.debug(f"No next link for {descriptor.path}, stopping after {fetched} page(s).")
                return

            if max_pages is not None and fetched >= max_pages:
                raise PageLimitExceededError(max_pages)

            logger.debug(f"Next link: {next_link}")
            current = self._next_page_request(current, next_link)

    @staticmethod
    def _next_page_request(
        descriptor: DOPagedRequest[PagedResponseT], next_link: str
    ) -> DOPagedRequest[PagedResponseT]:
        try:
            params = httpx.URL(next_link).params
        except httpx.InvalidURL as e:
            raise PaginationContractError(f"Cannot parse next link: {next_link!r}") from e

        page = params.get("page")
        per_page = params.get("per_page", params.get("perPage"))
        if page is None or per_page is None:
            raise PaginationContractError(
                f"Next link {next_link!r} does not carry both 'page' and 'per_page'"
            )
        try:
            return descriptor.changing_pages(int(page), int(per_page))
        except ValueError as e:
            raise PaginationContractError(
                f"Next link {next_link!r} has non-numeric page parameters"
            ) from e

    async def request_all(
        self, descriptor: DOPagedRequest[PagedResponseT]
    ) -> list[PagedResponseT]:
        """Fetch every page of a paginated endpoint.

        Returns:
            The decoded pages, in page order.

        Raises:
            PaginationError: If any page fails. `pages` holds the pages decoded
                before the failure (empty if the first page failed) and `error`
                the underlying `DOError`.
            PaginationContractError: If a next link lacks its page parameters.
        """
        pages: list[Any] = []
        try:
            async for page in self.iterate_pages(descriptor):
                pages.append(page)
        except DOError as e:
            logger.error(f"Pagination of {descriptor.path} stopped after {len(pages)} page(s): {e}")
            raise PaginationError(e, pages) from e

        logger.info(f"Fetched {len(pages)} page(s) from {descriptor.path}")
        return pages

    async def aclose(self) -> None:
        """Close every HTTP client this instance created."""
        closed = 0
        for client in self._owned_clients:
            if not client.is_closed:
                await client.aclose()
                closed += 1
        self._retired.clear()
        logger.debug(f"DigitalOcean client closed {closed} HTTP client(s).")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()
