from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_current_user
from app.crud.notifications import list_notifications
from app.schemas.notification import NotificationOut

router = APIRouter()

@router.get("", response_model=list[NotificationOut])
def get_notifications(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return list_notifications(db, user.id)
