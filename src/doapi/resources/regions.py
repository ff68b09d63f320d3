"""Region record embedded in other DigitalOcean resources."""

from pydantic import BaseModel, ConfigDict, Field


class Region(BaseModel):
    """A datacenter region.

    Attributes:
        slug: Unique identifier, e.g. ``nyc3``.
        name: Human-readable name, e.g. ``New York 3``.
        sizes: Droplet size slugs available in the region.
        available: Whether new resources can be created in the region.
        features: Feature flags such as ``backups`` or ``ipv6``.
    """

    slug: str
    name: str
    sizes: list[str] = Field(default_factory=list)
    available: bool = True
    features: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
