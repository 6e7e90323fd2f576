from app.db.models.project import Project
from app.services.stats import ASSIGNED_EARNING_STATUSES, HISTORY_EARNING_STATUSES, project_stats


def _set(db, project_id, **fields):
    db.expire_all()
    p = db.get(Project, project_id)
    for k, v in fields.items():
        setattr(p, k, v)
    db.commit()


def _assign(client, auth, owner, developer, project_id):
    r = client.post(f"/projects/{project_id}/assign", json={"developerId": developer.id}, headers=auth(owner))
    assert r.status_code == 200, r.text


def _pay(client, auth, owner, project_id, status="paid"):
    r = client.put(f"/projects/{project_id}/payment-status", json={"paymentStatus": status}, headers=auth(owner))
    assert r.status_code == 200, r.text


def test_project_stats_counts():
    projects = [
        Project(status="completed", assigned_developer_id=1, payment_status="released", accepted_bid_amount=100),
        Project(status="in-progress", assigned_developer_id=1, payment_status="paid", accepted_bid_amount=50),
        Project(status="cancelled", assigned_developer_id=2, payment_status="released", accepted_bid_amount=999),
        Project(status="assigned", assigned_developer_id=1, payment_status="released", accepted_bid_amount=None),
    ]
    s = project_stats(projects, 1, HISTORY_EARNING_STATUSES)
    assert (s.total, s.completed, s.cancelled, s.total_earnings) == (4, 1, 1, 100)
    assert project_stats(projects, 1, ASSIGNED_EARNING_STATUSES).total_earnings == 150


def test_history_and_assigned_earnings_differ(client, make_project, org, dev, bid_on, auth):
    released = make_project(org, title="Released")
    paid = make_project(org, title="Paid")
    for p, amount in ((released, 3000), (paid, 2000)):
        bid_on(dev, p["id"], amount=amount)
        _assign(client, auth, org, dev, p["id"])
        _pay(client, auth, org, p["id"])
    _pay(client, auth, org, released["id"], "released")

    history = client.get("/projects/history", headers=auth(dev)).json()
    assert history["stats"]["total"] == 2
    assert history["stats"]["totalEarnings"] == 3000

    assigned = client.get("/projects/assigned", headers=auth(dev)).json()
    assert {p["title"] for p in assigned["projects"]} == {"Released", "Paid"}
    assert assigned["stats"]["totalEarnings"] == 5000


def test_history_includes_developer_posted_projects(client, make_project, dev, auth):
    make_project(dev, title="Side project")
    body = client.get("/projects/history", headers=auth(dev)).json()
    assert [p["title"] for p in body["projects"]] == ["Side project"]
    assert body["stats"]["totalEarnings"] == 0
    assert client.get("/projects/assigned", headers=auth(dev)).json()["projects"] == []


def test_active_projects(client, make_project, org, dev, dev2, bid_on, auth, db):
    running = make_project(org, title="Running")
    make_project(org, title="Idle")
    bid_on(dev, running["id"])
    _assign(client, auth, org, dev, running["id"])
    _pay(client, auth, org, running["id"])

    assert [p["title"] for p in client.get("/projects/active", headers=auth(org)).json()] == ["Running"]
    assert [p["title"] for p in client.get("/projects/active", headers=auth(dev)).json()] == ["Running"]
    assert client.get("/projects/active", headers=auth(dev2)).json() == []

    _set(db, running["id"], status="completed")
    assert client.get("/projects/active", headers=auth(dev)).json() == []


def test_assigned_by_me_requires_payment(client, make_project, org, dev, bid_on, auth, db):
    paid = make_project(org, title="Paid")
    unpaid = make_project(org, title="Unpaid")
    done = make_project(org, title="Done")
    for p in (paid, unpaid, done):
        bid_on(dev, p["id"])
        _assign(client, auth, org, dev, p["id"])
    _pay(client, auth, org, paid["id"])
    _pay(client, auth, org, done["id"], "released")
    _set(db, done["id"], status="completed")

    titles = {p["title"] for p in client.get("/projects/assigned-by-me", headers=auth(org)).json()}
    assert titles == {"Paid", "Done"}
    assert client.get("/projects/assigned-by-me", headers=auth(dev)).json() == []


def test_invoice_lists(client, make_project, org, dev, bid_on, auth):
    pending = make_project(org, title="Pending")
    paid = make_project(org, title="Paid")
    make_project(org, title="Open")
    for p in (pending, paid):
        bid_on(dev, p["id"])
        _assign(client, auth, org, dev, p["id"])
    _pay(client, auth, org, paid["id"])

    titles = {p["title"] for p in client.get("/projects/invoices", headers=auth(org)).json()}
    assert titles == {"Pending", "Paid"}

    work = client.get("/projects/find-work-invoices", headers=auth(dev)).json()
    assert [p["title"] for p in work] == ["Paid"]
    assert client.get("/projects/find-work-invoices", headers=auth(org)).json() == []
