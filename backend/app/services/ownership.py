"""Resolve who owns a project.

A project is owned by exactly one poster, stored as a tagged reference
(``owner_kind`` + ``owner_id``). Every handler that needs "projects of the
caller" or "is the caller the poster" goes through this module instead of
branching on the caller's role itself.
"""
from dataclasses import dataclass

from sqlalchemy import and_

from app.db.models.project import Project
from app.db.models.user import Role, User


@dataclass(frozen=True)
class Owner:
    kind: Role
    id: int


def known_role(role: str | None) -> Role | None:
    try:
        return Role(role)
    except ValueError:
        return None


def owner_for(user: User) -> Owner:
    """Owner to stamp on a project the caller creates; unknown roles post as students."""
    kind = known_role(user.role) or Role.student
    return Owner(kind, user.id)


def owned_by(user: User):
    """SQL predicate: project posted by the caller under the caller's role.

    A caller with a role outside the three known ones matches on id alone.
    """
    kind = known_role(user.role)
    if kind is None:
        return Project.owner_id == user.id
    return and_(Project.owner_kind == kind.value, Project.owner_id == user.id)


def not_owned_by(user: User):
    return Project.owner_id != user.id


def is_owner(project: Project, user: User) -> bool:
    """True if the caller posted the project, whatever role they posted it under."""
    return project.owner_id == user.id


def is_role_owner(project: Project, user: User) -> bool:
    """True if the caller posted the project under the role they hold now."""
    kind = known_role(user.role)
    if kind is None:
        return False
    return project.owner_kind == kind.value and project.owner_id == user.id


def is_assignee(project: Project, user: User) -> bool:
    return project.assigned_developer_id is not None and project.assigned_developer_id == user.id
