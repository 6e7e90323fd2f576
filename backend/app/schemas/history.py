import datetime as dt

from app.schemas.common import CamelModel


class ProjectHistoryOut(CamelModel):
    id: int
    project_id: int
    project_title: str
    action: str
    details: str | None = None
    performed_by: int
    performed_by_role: str
    created_at: dt.datetime | None = None
