"""Request descriptors and response envelopes understood by the dispatcher.

A resource module describes each endpoint as a `DORequest` subclass: the HTTP
method and the response type are fixed per class, while the path, query and
body are derived from the instance's fields. The client never needs to know
anything else about a resource.

Example:
    ```python
    class GetImage(DORequest[ImageResponse]):
        method = "GET"
        response_model = ImageResponse

        id: int

        @property
        def path(self) -> str:
            return f"images/{self.id}"
    ```
"""

from typing import Any, ClassVar, Generic, Literal, Self, TypeVar

from pydantic import BaseModel, ConfigDict

HTTPMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]


class DONull:
    """Result of a call that has no meaningful body.

    Used as the `response_model` of endpoints that answer with no content and
    returned for every 204 response. `NULL` is the only instance.
    """

    _instance: "DONull | None" = None

    def __new__(cls) -> "DONull":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False


NULL = DONull()


class DOResponse(BaseModel):
    """Base model for every decoded response envelope."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LinkPages(BaseModel):
    """Named page URLs; any of them may be absent."""

    first: str | None = None
    prev: str | None = None
    next: str | None = None
    last: str | None = None


class Links(BaseModel):
    """The ``links`` object of a paged response."""

    pages: LinkPages | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def next(self) -> str | None:
        return self.pages.next if self.pages else None


class Meta(BaseModel):
    """The ``meta`` object of a paged response."""

    total: int

    model_config = ConfigDict(extra="allow")


class DOPagedResponse(DOResponse):
    """A response envelope that carries pagination metadata."""

    meta: Meta
    links: Links


ResponseT = TypeVar("ResponseT")
PagedResponseT = TypeVar("PagedResponseT", bound=DOPagedResponse)


class RemoteErrorDetail(BaseModel):
    """Error body returned by the API for 4xx/5xx responses.

    ``status`` is not part of the payload; the client fills it in with the
    observed HTTP status code after decoding.
    """

    id: str
    message: str
    status: int | None = None

    model_config = ConfigDict(extra="ignore")

    def describe(self) -> str:
        parts = ["Remote Error:", f"{self.id}:"]
        if self.status is not None:
            parts.append(f"code: {self.status}")
        parts.append(self.message)
        return " ".join(parts)


class DORequest(BaseModel, Generic[ResponseT]):
    """Describes one API call.

    Subclasses set the `method` and `response_model` class attributes and
    implement `path`. Override `query` and `body` when the endpoint takes them.

    Attributes:
        method: HTTP method of the call.
        response_model: Pydantic model the response body is decoded into, or
            `DONull` when the endpoint returns no content.
    """

    method: ClassVar[HTTPMethod]
    response_model: ClassVar[type[Any]]

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def path(self) -> str:
        """Path relative to the API base URL, e.g. ``images/42``."""
        raise NotImplementedError(f"{type(self).__name__} must define a path")

    @property
    def query(self) -> dict[str, str] | None:
        return None

    @property
    def body(self) -> BaseModel | None:
        return None


class DOPagedRequest(DORequest[PagedResponseT], Generic[PagedResponseT]):
    """A list request whose responses are paginated.

    Attributes:
        page: 1-based page number to request.
        per_page: Number of items per page.
    """

    page: int | None = None
    per_page: int | None = None

    def changing_pages(self, page: int | None, per_page: int | None) -> Self:
        """Return a copy of this request pointing at another page."""
        return self.model_copy(update={"page": page, "per_page": per_page})

    def page_query(self) -> dict[str, str]:
        if self.page is None or self.per_page is None:
            return {}
        return {"page": str(self.page), "per_page": str(self.per_page)}

    @property
    def query(self) -> dict[str, str] | None:
        return self.page_query() or None
