from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.db.models._mixins import TimestampMixin

class ProjectHistory(Base, TimestampMixin):
    __tablename__ = "project_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    # no FK: entries outlive a permanently deleted project
    project_id: Mapped[int] = mapped_column(Integer, index=True)
    project_title: Mapped[str] = mapped_column(String(256))
    action: Mapped[str] = mapped_column(String(32))  # closed|deleted
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    performed_by: Mapped[int] = mapped_column(Integer, index=True)
    performed_by_role: Mapped[str] = mapped_column(String(32))
