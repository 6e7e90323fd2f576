from enum import Enum
from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.db.models._mixins import TimestampMixin

class BidStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"

class Bid(Base, TimestampMixin):
    __tablename__ = "bid"

    id: Mapped[int] = mapped_column(primary_key=True)
    # no FK: bids are kept when their project is deleted
    project_id: Mapped[int] = mapped_column(Integer, index=True)
    bidder_id: Mapped[int] = mapped_column(ForeignKey("user.id", ondelete="CASCADE"), index=True)

    amount: Mapped[float] = mapped_column(Float)
    proposal: Mapped[str] = mapped_column(Text)
    user_name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    user_role: Mapped[str | None] = mapped_column(String(32), nullable=True)
    status: Mapped[str] = mapped_column(String(32), default=BidStatus.pending.value)

    project = relationship("Project", primaryjoin="foreign(Bid.project_id) == Project.id", back_populates="bids")
