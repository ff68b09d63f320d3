"""Images: distribution, application, snapshot and backup disk images.

Reference: https://docs.digitalocean.com/reference/api/api-reference/#tag/Images
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..codec import Timestamp
from ..descriptors import DONull, DOPagedRequest, DOPagedResponse, DORequest, DOResponse


class ImageType(str, Enum):
    APPLICATION = "application"
    SNAPSHOT = "snapshot"
    BACKUP = "backup"
    BASE = "base"
    CUSTOM = "custom"


class ImageListType(str, Enum):
    """Values accepted by the ``type`` filter of `ListImages`."""

    DISTRIBUTION = "distribution"
    APPLICATION = "application"
    SNAPSHOT = "snapshot"
    CUSTOM = "custom"
    BACKUP = "backup"


class Image(BaseModel):
    """A disk image.

    Attributes:
        id: Unique image id.
        name: Display name.
        type: Kind of image.
        distribution: Base OS distribution, e.g. ``Ubuntu``.
        slug: Public image slug; absent for private images.
        is_public: Whether the image is available to every account (``public``).
        regions: Slugs of the regions the image is available in.
        min_disk_size: Minimum disk size in GiB for a Droplet using the image.
        size_gigabytes: Size of the image in GiB. Documented as an integer but
            returned as a fractional number.
        created_at: Creation time.
    """

    id: int
    name: str
    type: ImageType
    distribution: str
    slug: str | None = None
    is_public: bool = Field(alias="public")
    regions: list[str] = Field(default_factory=list)
    min_disk_size: int
    size_gigabytes: float
    created_at: Timestamp

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ImageListResponse(DOPagedResponse):
    images: list[Image]


class ImageResponse(DOResponse):
    image: Image


class ListImages(DOPagedRequest[ImageListResponse]):
    """``GET /images``, optionally filtered by type or to private images."""

    method = "GET"
    response_model = ImageListResponse

    type: ImageListType | None = None
    private_only: bool = False
    page: int | None = 1
    per_page: int | None = 200

    @property
    def path(self) -> str:
        return "images"

    @property
    def query(self) -> dict[str, str] | None:
        items = self.page_query()
        if self.type is not None:
            items["type"] = self.type.value
        if self.private_only:
            items["private"] = "true"
        return items or None


class GetImage(DORequest[ImageResponse]):
    """``GET /images/{id}``."""

    method = "GET"
    response_model = ImageResponse

    id: int

    @property
    def path(self) -> str:
        return f"images/{self.id}"


class GetImageBySlug(DORequest[ImageResponse]):
    """``GET /images/{slug}`` for public images, e.g. ``ubuntu-22-04-x64``."""

    method = "GET"
    response_model = ImageResponse

    slug: str

    @property
    def path(self) -> str:
        return f"images/{self.slug}"


class UpdateImageBody(BaseModel):
    name: str


class UpdateImage(DORequest[ImageResponse]):
    """``PUT /images/{id}``: rename an image."""

    method = "PUT"
    response_model = ImageResponse

    id: int
    name: str

    @property
    def path(self) -> str:
        return f"images/{self.id}"

    @property
    def body(self) -> UpdateImageBody:
        return UpdateImageBody(name=self.name)


class DeleteImage(DORequest[DONull]):
    """``DELETE /images/{id}``; the API answers 204 No Content."""

    method = "DELETE"
    response_model = DONull

    id: int

    @property
    def path(self) -> str:
        return f"images/{self.id}"
