from app.db.models.project import Project
from app.db.models.user import Role, User
from app.services.ownership import Owner, is_assignee, is_owner, is_role_owner, owner_for


def test_owner_for_known_roles():
    assert owner_for(User(id=1, role="organization")) == Owner(Role.organization, 1)
    assert owner_for(User(id=2, role="developer")) == Owner(Role.developer, 2)
    assert owner_for(User(id=3, role="student")) == Owner(Role.student, 3)


def test_owner_for_unknown_role_posts_as_student():
    assert owner_for(User(id=9, role="admin")) == Owner(Role.student, 9)


def test_legacy_fields_follow_owner_kind():
    p = Project(owner_kind="organization", owner_id=7, owner_name="Acme Ltd")
    assert (p.company_id, p.developer_id, p.user_id) == (7, None, None)
    assert p.company_name == "Acme Ltd" and p.developer_name is None
    assert p.created_by == "Organization"

    p = Project(owner_kind="student", owner_id=8)
    assert (p.company_id, p.developer_id, p.user_id) == (None, None, 8)
    assert p.created_by == "Student"


def test_owner_checks():
    p = Project(owner_kind="developer", owner_id=5, assigned_developer_id=6)
    assert is_owner(p, User(id=5, role="developer"))
    assert is_owner(p, User(id=5, role="organization"))
    assert is_role_owner(p, User(id=5, role="developer"))
    assert not is_role_owner(p, User(id=5, role="organization"))
    assert not is_role_owner(p, User(id=5, role="admin"))
    assert is_assignee(p, User(id=6, role="developer"))
    assert not is_assignee(Project(owner_kind="student", owner_id=1), User(id=6, role="developer"))
