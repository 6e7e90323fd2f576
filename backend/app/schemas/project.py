import datetime as dt
from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.bid import BidOut


class ProjectCreate(CamelModel):
    # required fields are checked by the service so that a missing one is a 400
    title: str | None = None
    description: str | None = None
    skills: list[str] | None = None
    budget: float | None = None
    deadline: dt.datetime | None = None
    type: str | None = None
    file: str | None = None


class ProjectUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    skills: list[str] | None = None
    budget: float | None = None
    deadline: dt.datetime | None = None
    type: str | None = None


class AssignIn(CamelModel):
    developer_id: int
    bid_id: int | None = None


class CloseIn(CamelModel):
    permanent: bool = False


class PaymentStatusIn(CamelModel):
    payment_status: str | None = None


class ProgressIn(CamelModel):
    progress: float = Field(..., ge=0, le=100)


class ProjectOut(CamelModel):
    id: int
    title: str
    description: str
    skills: list[str] = []
    budget: float
    deadline: dt.datetime
    type: str
    file: str | None = None

    owner_kind: str
    owner_id: int
    company_id: int | None = None
    developer_id: int | None = None
    user_id: int | None = None
    company_name: str | None = None
    developer_name: str | None = None
    user_name: str | None = None
    created_by: str

    status: str
    is_visible: bool
    assigned_developer_id: int | None = Field(default=None, alias="assignedDeveloper")
    assigned_date: dt.datetime | None = None
    accepted_bid_id: int | None = Field(default=None, alias="acceptedBid")
    accepted_bid_amount: float | None = None
    payment_status: str | None = None
    payment_date: dt.datetime | None = None
    start_date: dt.datetime | None = None
    progress: float = 0
    closed_at: dt.datetime | None = None
    completed_at: dt.datetime | None = None
    last_update: dt.datetime | None = None

    version: int
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None

    bids: list[BidOut] = []


class ProjectEnvelope(CamelModel):
    success: bool
    message: str
    data: ProjectOut


class ProjectStats(CamelModel):
    total: int
    completed: int
    cancelled: int
    total_earnings: float


class ProjectsWithStats(CamelModel):
    projects: list[ProjectOut]
    stats: ProjectStats
