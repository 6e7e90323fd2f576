from typing import Iterable

from app.db.models.project import PaymentStatus, Project, ProjectStatus
from app.schemas.project import ProjectStats

# Earnings in the history view count only released payments; the assigned view
# also counts paid ones. Both are kept until the intended metric is confirmed.
HISTORY_EARNING_STATUSES = (PaymentStatus.released.value,)
ASSIGNED_EARNING_STATUSES = (PaymentStatus.released.value, PaymentStatus.paid.value)


def project_stats(
    projects: Iterable[Project],
    developer_id: int,
    earning_statuses: tuple[str, ...],
) -> ProjectStats:
    projects = list(projects)
    earnings = sum(
        p.accepted_bid_amount or 0
        for p in projects
        if p.assigned_developer_id == developer_id and p.payment_status in earning_statuses
    )
    return ProjectStats(
        total=len(projects),
        completed=sum(1 for p in projects if p.status == ProjectStatus.completed.value),
        cancelled=sum(1 for p in projects if p.status == ProjectStatus.cancelled.value),
        total_earnings=earnings,
    )
