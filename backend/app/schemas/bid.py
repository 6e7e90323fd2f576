import datetime as dt

from app.schemas.common import CamelModel


class BidCreate(CamelModel):
    amount: float | None = None
    proposal: str | None = None


class BidOut(CamelModel):
    id: int
    amount: float
    proposal: str
    user_name: str | None = None
    user_role: str | None = None
    bidder_id: int
    created_at: dt.datetime | None = None
    status: str


class BidSubmitted(CamelModel):
    id: int
    amount: float
    proposal: str
    user_name: str | None = None
    user_role: str | None = None
    created_at: dt.datetime | None = None


class BidSubmitOut(CamelModel):
    message: str
    bid: BidSubmitted


class ProjectBidOut(CamelModel):
    id: int
    user_name: str
    user_role: str
    amount: float
    proposal: str
    bidder_id: int
    user_id: int
    created_at: dt.datetime | None = None
    submitted_at: dt.datetime | None = None
    status: str


class ProjectBidsOut(CamelModel):
    project_id: int
    project_title: str
    bids: list[ProjectBidOut]
