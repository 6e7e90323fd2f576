from app.db.models.bid import Bid


def test_submit_bid_appends_to_project(client, make_project, org, dev, auth):
    p = make_project(org)
    r = client.post(f"/projects/{p['id']}/bids", json={"amount": 5000, "proposal": "x"}, headers=auth(dev))
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Bid submitted successfully"
    assert body["bid"]["amount"] == 5000
    assert body["bid"]["userName"] == "Ada Lovelace"
    assert body["bid"]["userRole"] == "developer"

    project = client.get(f"/projects/{p['id']}", headers=auth(org)).json()
    assert len(project["bids"]) == len(p["bids"]) + 1
    assert project["bids"][0]["id"] == body["bid"]["id"]
    assert project["bids"][0]["status"] == "pending"


def test_bids_keep_submission_order(client, make_project, org, dev, dev2, bid_on, auth):
    p = make_project(org)
    first = bid_on(dev, p["id"], amount=3000)
    second = bid_on(dev2, p["id"], amount=2500)
    bids = client.get(f"/projects/{p['id']}/bids", headers=auth(org)).json()["bids"]
    assert [b["id"] for b in bids] == [first["id"], second["id"]]


def test_organization_bidder_uses_company_name(client, make_project, student, org, bid_on, auth):
    p = make_project(student)
    assert bid_on(org, p["id"])["userName"] == "Acme Ltd"


def test_submit_bid_requires_amount_and_proposal(client, make_project, org, dev, auth):
    p = make_project(org)
    r = client.post(f"/projects/{p['id']}/bids", json={"proposal": "x"}, headers=auth(dev))
    assert r.status_code == 400
    r = client.post(f"/projects/{p['id']}/bids", json={"amount": 10}, headers=auth(dev))
    assert r.status_code == 400


def test_submit_bid_on_missing_project_leaves_no_bid(client, dev, db, auth):
    r = client.post("/projects/424242/bids", json={"amount": 5000, "proposal": "x"}, headers=auth(dev))
    assert r.status_code == 404
    assert db.query(Bid).count() == 0


def test_project_bids_visible_to_owner_only(client, make_project, org, dev, dev2, bid_on, auth):
    p = make_project(org)
    bid_on(dev, p["id"])
    r = client.get(f"/projects/{p['id']}/bids", headers=auth(dev2))
    assert r.status_code == 403

    r = client.get(f"/projects/{p['id']}/bids", headers=auth(org))
    assert r.status_code == 200
    body = r.json()
    assert body["projectId"] == p["id"]
    assert body["projectTitle"] == "Landing page"
    b = body["bids"][0]
    assert b["bidderId"] == dev.id and b["userId"] == dev.id
    assert b["submittedAt"] == b["createdAt"]


def test_project_bids_visible_to_assignee(client, make_project, org, dev, bid_on, auth):
    p = make_project(org)
    bid_on(dev, p["id"])
    client.post(f"/projects/{p['id']}/assign", json={"developerId": dev.id}, headers=auth(org))
    r = client.get(f"/projects/{p['id']}/bids", headers=auth(dev))
    assert r.status_code == 200


def test_project_bids_apply_display_defaults(client, make_project, org, dev, db, auth):
    p = make_project(org)
    db.add(Bid(project_id=p["id"], bidder_id=dev.id, amount=100, proposal="legacy", user_name=None, user_role=None))
    db.commit()

    b = client.get(f"/projects/{p['id']}/bids", headers=auth(org)).json()["bids"][0]
    assert b["userName"] == "Anonymous Developer"
    assert b["userRole"] == "Developer"
    assert b["status"] == "pending"


def test_project_bids_missing_project(client, dev, auth):
    assert client.get("/projects/31337/bids", headers=auth(dev)).status_code == 404
