"""doapi: typed asynchronous client for the DigitalOcean v2 API.

Resources are described by request descriptors (see `doapi.resources`) and
executed by a `DigitalOcean` client, which dispatches single calls and walks
paginated lists.
"""

__version__ = "0.1.0"

from .client import DigitalOcean
from .codec import TIMESTAMP_FORMAT, Timestamp, format_timestamp, parse_timestamp
from .config import DOSettings, get_settings
from .descriptors import (
    NULL,
    DONull,
    DOPagedRequest,
    DOPagedResponse,
    DORequest,
    DOResponse,
    Links,
    Meta,
    RemoteErrorDetail,
)
from .exceptions import (
    DecodeError,
    DOError,
    EncodeError,
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
from .log_config import configure_logging

__all__ = [
    "__version__",
    "NULL",
    "TIMESTAMP_FORMAT",
    "DOError",
    "DONull",
    "DOPagedRequest",
    "DOPagedResponse",
    "DORequest",
    "DOResponse",
    "DOSettings",
    "DecodeError",
    "DigitalOcean",
    "EncodeError",
    "ErrorStatusCodeError",
    "InvalidEndpointError",
    "Links",
    "Meta",
    "MissingBodyError",
    "NetworkError",
    "PageLimitExceededError",
    "PaginationContractError",
    "PaginationError",
    "RemoteError",
    "RemoteErrorDetail",
    "TimeoutError",
    "Timestamp",
    "TransportError",
    "UnacceptableStatusCodeError",
    "configure_logging",
    "format_timestamp",
    "get_settings",
    "parse_timestamp",
]
