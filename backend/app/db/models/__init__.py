# import all models for Alembic
from app.db.models.user import User
from app.db.models.project import Project
from app.db.models.bid import Bid
from app.db.models.project_history import ProjectHistory
from app.db.models.notification import Notification
