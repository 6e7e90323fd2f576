from sqlalchemy.orm import Session
from app.db.models.project_history import ProjectHistory

def add_history(
    db: Session,
    project_id: int,
    project_title: str,
    action: str,
    details: str,
    performed_by: int,
    performed_by_role: str,
) -> ProjectHistory:
    # caller commits, so the entry lands with the change it records
    entry = ProjectHistory(
        project_id=project_id,
        project_title=project_title,
        action=action,
        details=details,
        performed_by=performed_by,
        performed_by_role=performed_by_role,
    )
    db.add(entry)
    return entry

def list_history(db: Session, project_id: int, performed_by: int | None = None):
    q = db.query(ProjectHistory).filter(ProjectHistory.project_id == project_id)
    if performed_by is not None:
        q = q.filter(ProjectHistory.performed_by == performed_by)
    return q.order_by(ProjectHistory.id.desc()).all()
