import datetime as dt
from enum import Enum
from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.db.models._mixins import TimestampMixin
from app.db.models.user import Role


class ProjectStatus(str, Enum):
    open = "open"
    assigned = "assigned"
    in_progress = "in-progress"
    submitted = "submitted"
    rejected = "rejected"
    completed = "completed"
    cancelled = "cancelled"
    closed = "closed"


class PaymentStatus(str, Enum):
    pending = "pending"
    paid = "paid"
    released = "released"


CREATED_BY_LABELS = {
    Role.organization.value: "Organization",
    Role.developer.value: "Developer",
    Role.student.value: "Student",
}


class Project(Base, TimestampMixin):
    __tablename__ = "project"

    id: Mapped[int] = mapped_column(primary_key=True)

    # owner is a tagged reference: kind is a Role value, id points at the poster
    owner_kind: Mapped[str] = mapped_column(String(32), index=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("user.id", ondelete="CASCADE"), index=True)
    owner_name: Mapped[str | None] = mapped_column(String(256), nullable=True)

    title: Mapped[str] = mapped_column(String(256))
    description: Mapped[str] = mapped_column(Text)
    skills: Mapped[list[str]] = mapped_column(JSON, default=list)
    budget: Mapped[float] = mapped_column(Float)
    deadline: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True))
    type: Mapped[str] = mapped_column(String(128), default="Full Stack Project")
    file: Mapped[str | None] = mapped_column(String(512), nullable=True)

    status: Mapped[str] = mapped_column(String(32), default=ProjectStatus.open.value, index=True)
    is_visible: Mapped[bool] = mapped_column(Boolean, default=True)

    assigned_developer_id: Mapped[int | None] = mapped_column(
        ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    assigned_date: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    accepted_bid_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    accepted_bid_amount: Mapped[float | None] = mapped_column(Float, nullable=True)

    payment_status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    payment_date: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    start_date: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    progress: Mapped[float] = mapped_column(Float, default=0)

    closed_at: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_update: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    __mapper_args__ = {"version_id_col": version}

    owner = relationship("User", foreign_keys=[owner_id])
    assigned_developer = relationship("User", foreign_keys=[assigned_developer_id])
    # bids outlive their project, so no FK and no ORM delete cascade
    bids = relationship(
        "Bid",
        primaryjoin="Project.id == foreign(Bid.project_id)",
        back_populates="project",
        order_by="Bid.id",
        passive_deletes="all",
    )

    # legacy ownership fields, derived from the tagged owner
    def _owner_if(self, kind: Role) -> int | None:
        return self.owner_id if self.owner_kind == kind.value else None

    @property
    def company_id(self) -> int | None:
        return self._owner_if(Role.organization)

    @property
    def developer_id(self) -> int | None:
        return self._owner_if(Role.developer)

    @property
    def user_id(self) -> int | None:
        return self._owner_if(Role.student)

    @property
    def company_name(self) -> str | None:
        return self.owner_name if self.owner_kind == Role.organization.value else None

    @property
    def developer_name(self) -> str | None:
        return self.owner_name if self.owner_kind == Role.developer.value else None

    @property
    def user_name(self) -> str | None:
        return self.owner_name if self.owner_kind == Role.student.value else None

    @property
    def created_by(self) -> str:
        return CREATED_BY_LABELS.get(self.owner_kind, "Student")
