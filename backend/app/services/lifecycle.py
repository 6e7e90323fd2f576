"""Project and bid lifecycle: creation, assignment, closing, bidding, payment."""
import datetime as dt
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from app.core.logging import logger
from app.crud import bids as bids_crud
from app.crud import history as history_crud
from app.crud import projects as projects_crud
from app.crud.notifications import add_notification
from app.db.models.bid import BidStatus
from app.db.models.project import PaymentStatus, Project, ProjectStatus
from app.db.models.user import User
from app.schemas.bid import ProjectBidOut, ProjectBidsOut
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.services.ownership import is_assignee, is_owner, is_role_owner, owner_for

DEFAULT_PERFORMER_ROLE = "Organization"


def _now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _load(db: Session, project_id: int) -> Project:
    p = projects_crud.get_project(db, project_id)
    if not p:
        raise NotFoundError("Project not found")
    return p


def _check_version(p: Project, expected_version: int | None) -> None:
    if expected_version is not None and expected_version != p.version:
        raise ConflictError(f"Project version is {p.version}, request expected {expected_version}")


def create_project(db: Session, user: User, data: ProjectCreate) -> Project:
    # an empty skills list is accepted, only a missing one is rejected
    if not (data.title and data.description and data.budget and data.deadline) or data.skills is None:
        raise ValidationError("All required fields must be provided")

    owner = owner_for(user)
    p = projects_crud.create_project(
        db,
        owner=owner,
        owner_name=user.display_name,
        title=data.title,
        description=data.description,
        skills=data.skills,
        budget=data.budget,
        deadline=data.deadline,
        type=data.type or settings.DEFAULT_PROJECT_TYPE,
        file=data.file,
    )
    logger.info("project_created", project_id=p.id, owner_kind=owner.kind.value, owner_id=owner.id)
    return p


def update_project(
    db: Session, project_id: int, user: User, data: ProjectUpdate, expected_version: int | None = None
) -> Project:
    p = _load(db, project_id)
    if not is_owner(p, user):
        raise ForbiddenError("Not authorized to update this project")
    _check_version(p, expected_version)
    p = projects_crud.update_project(db, p, data)
    logger.info("project_updated", project_id=p.id, version=p.version)
    return p


def assign_project(
    db: Session,
    project_id: int,
    user: User,
    developer_id: int,
    bid_id: int | None = None,
    expected_version: int | None = None,
) -> Project:
    p = _load(db, project_id)
    if not is_owner(p, user):
        logger.info("assign_forbidden", project_id=project_id, user_id=user.id)
        raise ForbiddenError("Not authorized to assign this project")
    _check_version(p, expected_version)

    if bid_id is not None:
        bid = bids_crud.get_bid_for_project(db, p.id, bid_id)
    else:
        bid = bids_crud.find_bid_by_bidder(db, p.id, developer_id)
    if not bid:
        raise ValidationError("No valid bid found for this developer")

    p.assigned_developer_id = developer_id
    p.status = ProjectStatus.assigned.value
    p.assigned_date = _now()
    p.is_visible = False
    p.payment_status = PaymentStatus.pending.value
    p.accepted_bid_id = bid.id
    p.accepted_bid_amount = bid.amount
    bids_crud.settle_bids(db, p.id, bid)

    add_notification(
        db,
        user_id=developer_id,
        title="Project Assigned",
        message=f"You have been assigned to project: {p.title}",
        project_id=p.id,
    )
    db.commit()
    db.refresh(p)
    logger.info("project_assigned", project_id=p.id, developer_id=developer_id, bid_id=bid.id, amount=bid.amount)
    return p


def close_project(db: Session, project_id: int, user: User, permanent: bool) -> str:
    # TODO: require ownership here once the product owner confirms who may close or delete a project
    p = _load(db, project_id)
    role = user.role or DEFAULT_PERFORMER_ROLE

    if permanent:
        title = p.title
        db.delete(p)
        history_crud.add_history(
            db, project_id, title, "deleted", "Project was permanently deleted", user.id, role
        )
        db.commit()
        logger.info("project_deleted", project_id=project_id, performed_by=user.id)
        return "Project deleted successfully"

    p.status = ProjectStatus.closed.value
    p.closed_at = _now()
    history_crud.add_history(db, p.id, p.title, "closed", "Project was closed", user.id, role)
    db.commit()
    logger.info("project_closed", project_id=project_id, performed_by=user.id)
    return "Project closed successfully"


def project_history(db: Session, project_id: int, user: User):
    p = projects_crud.get_project(db, project_id)
    if p and is_owner(p, user):
        return history_crud.list_history(db, project_id)
    return history_crud.list_history(db, project_id, performed_by=user.id)


def submit_bid(db: Session, project_id: int, user: User, amount: float | None, proposal: str | None):
    if not amount or not proposal:
        raise ValidationError("Amount and proposal are required")
    p = _load(db, project_id)
    bid = projects_crud.add_bid(db, p, user, amount, proposal)
    logger.info("bid_submitted", project_id=p.id, bid_id=bid.id, bidder_id=user.id, amount=amount)
    return bid


def project_bids(db: Session, project_id: int, user: User) -> ProjectBidsOut:
    p = _load(db, project_id)
    if not (is_role_owner(p, user) or is_assignee(p, user)):
        raise ForbiddenError("Access denied - you can only view bids for your own projects")

    bids = [
        ProjectBidOut(
            id=b.id,
            user_name=b.user_name or "Anonymous Developer",
            user_role=b.user_role or "Developer",
            amount=b.amount,
            proposal=b.proposal,
            bidder_id=b.bidder_id,
            user_id=b.bidder_id,
            created_at=b.created_at,
            submitted_at=b.created_at,
            status=b.status or BidStatus.pending.value,
        )
        for b in p.bids
    ]
    return ProjectBidsOut(project_id=p.id, project_title=p.title, bids=bids)


def update_payment_status(db: Session, project_id: int, user: User, payment_status: str | None) -> Project:
    p = projects_crud.get_owned_project(db, project_id, user)
    if not p:
        raise NotFoundError("Project not found or unauthorized")
    try:
        status = PaymentStatus(payment_status)
    except ValueError:
        raise ValidationError(f"Invalid payment status: {payment_status}")

    now = _now()
    p.payment_status = status.value
    p.payment_date = now
    if status is PaymentStatus.paid and not p.start_date:
        p.start_date = now
        p.status = ProjectStatus.in_progress.value
    db.commit()
    db.refresh(p)
    logger.info("payment_status_updated", project_id=p.id, payment_status=p.payment_status, status=p.status)
    return p


def update_progress(db: Session, project_id: int, user: User, progress: float) -> Project:
    p = projects_crud.get_project(db, project_id)
    if not p or not (is_role_owner(p, user) or is_assignee(p, user)):
        raise NotFoundError("Project not found or unauthorized")
    p.progress = progress
    db.commit()
    db.refresh(p)
    logger.info("progress_updated", project_id=p.id, progress=progress)
    return p


def invoice_project(db: Session, project_id: int, user: User) -> Project:
    p = _load(db, project_id)
    if not (is_assignee(p, user) or is_owner(p, user)):
        raise ForbiddenError("Not authorized to download this invoice")
    return p
