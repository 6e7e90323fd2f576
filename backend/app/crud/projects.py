import datetime as dt
from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, selectinload

from app.db.models.bid import Bid
from app.db.models.project import PaymentStatus, Project, ProjectStatus
from app.db.models.user import Role, User
from app.schemas.project import ProjectUpdate
from app.services.ownership import Owner, owned_by, not_owned_by

PAID = (PaymentStatus.paid.value, PaymentStatus.released.value)


def _query(db: Session):
    return db.query(Project).options(selectinload(Project.bids))


def _newest_first(q):
    return q.order_by(Project.created_at.desc(), Project.id.desc())


def _recently_updated_first(q):
    return q.order_by(Project.updated_at.desc(), Project.id.desc())


def get_project(db: Session, project_id: int) -> Project | None:
    return _query(db).filter(Project.id == project_id).one_or_none()


def get_owned_project(db: Session, project_id: int, user: User) -> Project | None:
    return _query(db).filter(Project.id == project_id, owned_by(user)).one_or_none()


def create_project(
    db: Session,
    owner: Owner,
    owner_name: str,
    title: str,
    description: str,
    skills: list[str],
    budget: float,
    deadline: dt.datetime,
    type: str,
    file: str | None = None,
) -> Project:
    p = Project(
        owner_kind=owner.kind.value,
        owner_id=owner.id,
        owner_name=owner_name,
        title=title,
        description=description,
        skills=list(skills),
        budget=budget,
        deadline=deadline,
        type=type,
        file=file,
        status=ProjectStatus.open.value,
        is_visible=True,
    )
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def update_project(db: Session, p: Project, data: ProjectUpdate) -> Project:
    for field in ("title", "description", "skills", "budget", "deadline", "type"):
        value = getattr(data, field)
        if value is not None:
            setattr(p, field, value)
    p.last_update = dt.datetime.now(dt.timezone.utc)
    db.commit()
    db.refresh(p)
    return p


def delete_owned_project(db: Session, project_id: int, user: User) -> bool:
    p = get_owned_project(db, project_id, user)
    if not p:
        return False
    db.delete(p)
    db.commit()
    return True


def list_projects_for_owner(db: Session, user: User):
    q = _query(db).filter(
        owned_by(user),
        Project.status != ProjectStatus.assigned.value,
        Project.is_visible.is_(True),
    )
    return _newest_first(q).all()


def list_available_projects(db: Session, user: User):
    q = _query(db).filter(not_owned_by(user), Project.status == ProjectStatus.open.value)
    return _newest_first(q).all()


def list_active_projects(db: Session, user: User):
    q = _query(db).filter(
        or_(Project.owner_id == user.id, Project.assigned_developer_id == user.id),
        Project.status.in_(
            (ProjectStatus.in_progress.value, ProjectStatus.submitted.value, ProjectStatus.rejected.value)
        ),
    )
    return q.order_by(Project.assigned_date.desc(), Project.id.desc()).all()


def list_assigned_to(db: Session, user: User):
    q = _query(db).filter(Project.assigned_developer_id == user.id)
    return _recently_updated_first(q).all()


def list_worked_on(db: Session, user: User):
    """Projects the caller is assigned to, or posted as a developer."""
    q = _query(db).filter(_worked_on(user))
    return _recently_updated_first(q).all()


def _worked_on(user: User):
    return or_(
        Project.assigned_developer_id == user.id,
        and_(Project.owner_kind == Role.developer.value, Project.owner_id == user.id),
    )


def list_assigned_by_me(db: Session, user: User):
    q = _query(db).filter(
        owned_by(user),
        Project.status.in_(
            (
                ProjectStatus.in_progress.value,
                ProjectStatus.submitted.value,
                ProjectStatus.rejected.value,
                ProjectStatus.completed.value,
            )
        ),
        Project.payment_status.in_(PAID),
    )
    return _newest_first(q).all()


def list_invoice_projects(db: Session, user: User):
    q = _query(db).filter(
        owned_by(user),
        or_(
            and_(
                Project.status == ProjectStatus.assigned.value,
                Project.payment_status == PaymentStatus.pending.value,
            ),
            and_(
                Project.status.in_((ProjectStatus.in_progress.value, ProjectStatus.completed.value)),
                Project.payment_status.in_(PAID),
            ),
        ),
    )
    return _recently_updated_first(q).all()


def list_find_work_invoices(db: Session, user: User):
    q = _query(db).filter(
        _worked_on(user),
        Project.status.in_((ProjectStatus.completed.value, ProjectStatus.in_progress.value)),
        Project.payment_status.in_(PAID),
    )
    return _recently_updated_first(q).all()


def add_bid(db: Session, p: Project, bidder: User, amount: float, proposal: str) -> Bid:
    bid = Bid(
        bidder_id=bidder.id,
        amount=amount,
        proposal=proposal,
        user_name=bidder.display_name,
        user_role=bidder.role,
    )
    # appended through the relationship: bid row and project link commit together
    p.bids.append(bid)
    db.commit()
    db.refresh(bid)
    return bid
