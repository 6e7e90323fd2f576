from sqlalchemy.orm import Session
from app.db.models.notification import Notification

def add_notification(db: Session, user_id: int, title: str, message: str, project_id: int | None = None) -> Notification:
    n = Notification(
        user_id=user_id,
        title=title,
        message=message,
        type="info",
        link=f"/project/{project_id}" if project_id else None,
    )
    db.add(n)
    return n

def list_notifications(db: Session, user_id: int):
    return db.query(Notification).filter(Notification.user_id == user_id).order_by(Notification.id.desc()).all()
