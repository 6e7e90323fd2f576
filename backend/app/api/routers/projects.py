from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session
from starlette.background import BackgroundTask

from app.core.deps import get_db, get_current_user, get_expected_version
from app.core.errors import NotFoundError
from app.core.logging import logger
from app.crud import projects as projects_crud
from app.schemas.bid import BidCreate, BidSubmitOut, BidSubmitted, ProjectBidsOut
from app.schemas.common import MessageOut
from app.schemas.history import ProjectHistoryOut
from app.schemas.project import (
    AssignIn,
    CloseIn,
    PaymentStatusIn,
    ProgressIn,
    ProjectCreate,
    ProjectEnvelope,
    ProjectOut,
    ProjectsWithStats,
    ProjectUpdate,
)
from app.services import lifecycle
from app.services.exports.exporter import default_export_path, export_invoice_pdf, invoice_data
from app.services.stats import ASSIGNED_EARNING_STATUSES, HISTORY_EARNING_STATUSES, project_stats

router = APIRouter()

# fixed paths first so they are not captured by /{project_id}

@router.post("", response_model=ProjectOut, status_code=201)
def post_project(data: ProjectCreate, db: Session = Depends(get_db), user=Depends(get_current_user)):
    return lifecycle.create_project(db, user, data)

@router.get("", response_model=list[ProjectOut])
def get_projects(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return projects_crud.list_projects_for_owner(db, user)

@router.get("/available", response_model=list[ProjectOut])
def get_available_projects(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return projects_crud.list_available_projects(db, user)

@router.get("/active", response_model=list[ProjectOut])
def get_active_projects(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return projects_crud.list_active_projects(db, user)

@router.get("/assigned", response_model=ProjectsWithStats)
def get_assigned_projects(db: Session = Depends(get_db), user=Depends(get_current_user)):
    projects = projects_crud.list_assigned_to(db, user)
    return ProjectsWithStats(
        projects=[ProjectOut.model_validate(p) for p in projects],
        stats=project_stats(projects, user.id, ASSIGNED_EARNING_STATUSES),
    )

@router.get("/assigned-by-me", response_model=list[ProjectOut])
def get_assigned_by_me(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return projects_crud.list_assigned_by_me(db, user)

@router.get("/history", response_model=ProjectsWithStats)
def get_project_history(db: Session = Depends(get_db), user=Depends(get_current_user)):
    projects = projects_crud.list_worked_on(db, user)
    return ProjectsWithStats(
        projects=[ProjectOut.model_validate(p) for p in projects],
        stats=project_stats(projects, user.id, HISTORY_EARNING_STATUSES),
    )

@router.get("/invoices", response_model=list[ProjectOut])
def get_invoice_projects(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return projects_crud.list_invoice_projects(db, user)

@router.get("/find-work-invoices", response_model=list[ProjectOut])
def get_find_work_invoices(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return projects_crud.list_find_work_invoices(db, user)

@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    p = projects_crud.get_project(db, project_id)
    if not p:
        raise NotFoundError("Project not found")
    return p

@router.put("/{project_id}", response_model=ProjectEnvelope)
def put_project(
    project_id: int,
    data: ProjectUpdate,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
    expected_version: int | None = Depends(get_expected_version),
):
    p = lifecycle.update_project(db, project_id, user, data, expected_version=expected_version)
    return ProjectEnvelope(success=True, message="Project updated successfully", data=ProjectOut.model_validate(p))

@router.delete("/{project_id}", response_model=MessageOut)
def delete_project(project_id: int, db: Session = Depends(get_db), user=Depends(get_current_user)):
    if not projects_crud.delete_owned_project(db, project_id, user):
        raise NotFoundError("Project not found or unauthorized")
    logger.info("project_removed", project_id=project_id, user_id=user.id)
    return MessageOut(message="Project deleted successfully")

@router.post("/{project_id}/close", response_model=MessageOut)
def close_project(
    project_id: int, data: CloseIn | None = None, db: Session = Depends(get_db), user=Depends(get_current_user)
):
    # a missing body is a plain close
    permanent = data.permanent if data else False
    return MessageOut(message=lifecycle.close_project(db, project_id, user, permanent=permanent))

@router.post("/{project_id}/assign", response_model=ProjectEnvelope)
def assign_project(
    project_id: int,
    data: AssignIn,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
    expected_version: int | None = Depends(get_expected_version),
):
    p = lifecycle.assign_project(
        db, project_id, user, data.developer_id, bid_id=data.bid_id, expected_version=expected_version
    )
    return ProjectEnvelope(success=True, message="Project assigned successfully", data=ProjectOut.model_validate(p))

@router.get("/{project_id}/history", response_model=list[ProjectHistoryOut])
def get_history_entries(project_id: int, db: Session = Depends(get_db), user=Depends(get_current_user)):
    return lifecycle.project_history(db, project_id, user)

@router.post("/{project_id}/bids", response_model=BidSubmitOut, status_code=201)
def post_bid(project_id: int, data: BidCreate, db: Session = Depends(get_db), user=Depends(get_current_user)):
    bid = lifecycle.submit_bid(db, project_id, user, data.amount, data.proposal)
    return BidSubmitOut(message="Bid submitted successfully", bid=BidSubmitted.model_validate(bid))

@router.get("/{project_id}/bids", response_model=ProjectBidsOut)
def get_bids(project_id: int, db: Session = Depends(get_db), user=Depends(get_current_user)):
    return lifecycle.project_bids(db, project_id, user)

@router.put("/{project_id}/payment-status", response_model=ProjectOut)
def put_payment_status(
    project_id: int, data: PaymentStatusIn, db: Session = Depends(get_db), user=Depends(get_current_user)
):
    return lifecycle.update_payment_status(db, project_id, user, data.payment_status)

@router.put("/{project_id}/progress", response_model=ProjectOut)
def put_progress(project_id: int, data: ProgressIn, db: Session = Depends(get_db), user=Depends(get_current_user)):
    return lifecycle.update_progress(db, project_id, user, data.progress)

def _remove_file(path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("invoice_cleanup_failed", path=str(path), error=str(e))

@router.get("/{project_id}/invoice")
def download_invoice(project_id: int, db: Session = Depends(get_db), user=Depends(get_current_user)):
    p = lifecycle.invoice_project(db, project_id, user)
    out = default_export_path(f"invoice-{project_id}", "pdf")
    export_invoice_pdf(invoice_data(p), out)
    logger.info("invoice_generated", project_id=project_id, user_id=user.id)
    return FileResponse(
        str(out),
        media_type="application/pdf",
        filename=f"invoice-{project_id}.pdf",
        background=BackgroundTask(_remove_file, out),
    )
