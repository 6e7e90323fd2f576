import datetime as dt
from sqlalchemy.orm import Session
from app.db.session import SessionLocal
from app.core.config import settings
from app.core.logging import logger
from app.crud.users import get_user_by_login, create_user
from app.schemas.auth import UserCreateIn
from app.db.models.user import Role
from app.crud.projects import list_projects_for_owner, create_project
from app.services.ownership import owner_for

DEMO_USERS = [
    dict(login="org@demo.local", role=Role.organization.value, company_name="Demo Organization"),
    dict(login="dev@demo.local", role=Role.developer.value, first_name="Demo", last_name="Developer"),
    dict(login="student@demo.local", role=Role.student.value, first_name="Demo", last_name="Student"),
]

def seed_demo():
    db: Session = SessionLocal()
    try:
        users = []
        for fields in DEMO_USERS:
            u = get_user_by_login(db, fields["login"])
            if not u:
                u = create_user(db, UserCreateIn(password=settings.DEMO_PASSWORD, **fields))
            users.append(u)
        # Create a demo posting for the organization if it has none
        org = users[0]
        if not list_projects_for_owner(db, org):
            create_project(
                db,
                owner=owner_for(org),
                owner_name=org.display_name,
                title="Demo Project",
                description="Seeded demo project",
                skills=["python", "react"],
                budget=5000,
                deadline=dt.datetime.now(dt.timezone.utc) + dt.timedelta(days=30),
                type=settings.DEFAULT_PROJECT_TYPE,
            )
        logger.info("demo_seeded", users=len(users))
    finally:
        db.close()
