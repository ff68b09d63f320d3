"""Floating IP actions: assigning a floating IP to a Droplet and back.

Reference: https://docs.digitalocean.com/reference/api/api-reference/#tag/Floating-IP-Actions
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from ..codec import Timestamp
from ..descriptors import DORequest, DOResponse
from .regions import Region


class ActionStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ERRORED = "errored"


class ActionType(str, Enum):
    ASSIGN = "assign"
    UNASSIGN = "unassign"


class FloatingIPAction(BaseModel):
    """An action performed on a floating IP.

    ``region`` is the full region object while ``region_slug`` is the bare
    slug; the API sends both.
    """

    id: int
    status: ActionStatus
    type: ActionType
    started_at: Timestamp
    completed_at: Timestamp | None = None
    resource_id: int | None = None
    resource_type: str
    region: Region
    region_slug: str | None = None

    model_config = ConfigDict(extra="ignore")


class FloatingIPActionResponse(DOResponse):
    action: FloatingIPAction


class FloatingIPActionListResponse(DOResponse):
    actions: list[FloatingIPAction]


class AssignBody(BaseModel):
    type: Literal["assign"] = "assign"
    droplet_id: int


class UnassignBody(BaseModel):
    type: Literal["unassign"] = "unassign"


class AssignFloatingIP(DORequest[FloatingIPActionResponse]):
    """``POST /floating_ips/{ip}/actions`` with ``type=assign``."""

    method = "POST"
    response_model = FloatingIPActionResponse

    ip: str
    droplet_id: int

    @property
    def path(self) -> str:
        return f"floating_ips/{self.ip}/actions"

    @property
    def body(self) -> AssignBody:
        return AssignBody(droplet_id=self.droplet_id)


class UnassignFloatingIP(DORequest[FloatingIPActionResponse]):
    """``POST /floating_ips/{ip}/actions`` with ``type=unassign``."""

    method = "POST"
    response_model = FloatingIPActionResponse

    ip: str

    @property
    def path(self) -> str:
        return f"floating_ips/{self.ip}/actions"

    @property
    def body(self) -> UnassignBody:
        return UnassignBody()


class ListFloatingIPActions(DORequest[FloatingIPActionListResponse]):
    method = "GET"
    response_model = FloatingIPActionListResponse

    ip: str

    @property
    def path(self) -> str:
        return f"floating_ips/{self.ip}/actions"


class GetFloatingIPAction(DORequest[FloatingIPActionResponse]):
    method = "GET"
    response_model = FloatingIPActionResponse

    ip: str
    action_id: int

    @property
    def path(self) -> str:
        return f"floating_ips/{self.ip}/actions/{self.action_id}"
