import datetime as dt
from pathlib import Path
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import mm

from app.core.config import settings
from app.db.models.project import Project
from app.db.models.user import Role

def invoice_amounts(project: Project, fee_rate: float | None = None) -> dict:
    rate = settings.PLATFORM_FEE_RATE if fee_rate is None else fee_rate
    total = project.accepted_bid_amount or project.budget or 0
    fee = total * rate
    return {"total_amount": total, "platform_fee": fee, "final_amount": total - fee, "fee_rate": rate}

def invoice_data(project: Project) -> dict:
    """Fields printed on an invoice, resolved from the project and its people."""
    if project.owner_kind == Role.developer.value:
        client = None
    else:
        client = project.owner.display_name if project.owner else project.owner_name
    if project.assigned_developer is not None:
        developer = project.assigned_developer.display_name
    elif project.owner_kind == Role.developer.value:
        developer = project.owner_name
    else:
        developer = None
    return {
        "project_id": project.id,
        "title": project.title,
        "status": project.status,
        "payment_status": project.payment_status,
        "client_label": "Company" if project.owner_kind == Role.organization.value else "Client",
        "client": client,
        "developer": developer,
        "created_at": project.created_at,
        "completed_at": project.completed_at,
        "payment_date": project.payment_date,
        **invoice_amounts(project),
    }

def _money(v: float) -> str:
    return f"{settings.INVOICE_CURRENCY} {v:,.2f}"

def _date(v: dt.datetime | None) -> str:
    return v.strftime("%Y-%m-%d") if v else "-"

def export_invoice_pdf(data: dict, out_path: Path):
    out_path.parent.mkdir(parents=True, exist_ok=True)
    c = canvas.Canvas(str(out_path), pagesize=A4)
    width, height = A4
    y = height - 20*mm
    c.setFont("Helvetica-Bold", 18)
    c.drawCentredString(width / 2, y, "Invoice")
    y -= 12*mm

    sections = [
        ("Project Details", [
            f"Title: {data['title']}",
            f"Status: {data['status']}",
            f"Payment Status: {data['payment_status'] or '-'}",
        ]),
        ("Client Details", [f"{data['client_label']}: {data['client']}"] if data["client"] else []),
        ("Developer Details", [f"Developer: {data['developer']}"] if data["developer"] else []),
        ("Payment Details", [
            f"Total Amount: {_money(data['total_amount'])}",
            f"Platform Fee ({data['fee_rate'] * 100:.0f}%): {_money(data['platform_fee'])}",
            f"Final Amount: {_money(data['final_amount'])}",
        ]),
        ("Dates", [f"Created: {_date(data['created_at'])}"]
            + ([f"Completed: {_date(data['completed_at'])}"] if data["completed_at"] else [])
            + ([f"Payment Date: {_date(data['payment_date'])}"] if data["payment_date"] else [])),
    ]
    for heading, lines in sections:
        c.setFont("Helvetica-Bold", 13)
        c.drawString(20*mm, y, f"{heading}:")
        y -= 7*mm
        c.setFont("Helvetica", 11)
        for ln in lines:
            c.drawString(25*mm, y, ln)
            y -= 6*mm
        y -= 4*mm
    c.showPage()
    c.save()
    return out_path

def default_export_path(prefix: str, ext: str) -> Path:
    ts = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
    return Path(settings.EXPORT_DIR) / f"{prefix}_{ts}.{ext}"
