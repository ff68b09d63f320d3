"""Request descriptors and records for individual DigitalOcean resources."""

from .floating_ip_actions import (
    ActionStatus,
    ActionType,
    AssignFloatingIP,
    FloatingIPAction,
    FloatingIPActionListResponse,
    FloatingIPActionResponse,
    GetFloatingIPAction,
    ListFloatingIPActions,
    UnassignFloatingIP,
)
from .images import (
    DeleteImage,
    GetImage,
    GetImageBySlug,
    Image,
    ImageListResponse,
    ImageListType,
    ImageResponse,
    ImageType,
    ListImages,
    UpdateImage,
)
from .regions import Region

__all__ = [
    "ActionStatus",
    "ActionType",
    "AssignFloatingIP",
    "DeleteImage",
    "FloatingIPAction",
    "FloatingIPActionListResponse",
    "FloatingIPActionResponse",
    "GetFloatingIPAction",
    "GetImage",
    "GetImageBySlug",
    "Image",
    "ImageListResponse",
    "ImageListType",
    "ImageResponse",
    "ImageType",
    "ListFloatingIPActions",
    "ListImages",
    "Region",
    "UnassignFloatingIP",
    "UpdateImage",
]
