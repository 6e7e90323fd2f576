import datetime as dt

from app.schemas.common import CamelModel


class NotificationOut(CamelModel):
    id: int
    title: str
    message: str
    type: str
    link: str | None = None
    is_read: bool
    created_at: dt.datetime | None = None
