import os

import pytest

from app.core.config import settings
from app.db.models.project import Project
from app.services.exports.exporter import export_invoice_pdf, invoice_amounts


def test_invoice_amounts_use_accepted_bid():
    p = Project(budget=8000, accepted_bid_amount=5000)
    assert invoice_amounts(p) == {
        "total_amount": 5000,
        "platform_fee": pytest.approx(500),
        "final_amount": pytest.approx(4500),
        "fee_rate": 0.10,
    }


def test_invoice_amounts_fall_back_to_budget():
    p = Project(budget=8000, accepted_bid_amount=None)
    amounts = invoice_amounts(p, fee_rate=0.2)
    assert amounts["total_amount"] == 8000
    assert amounts["platform_fee"] == pytest.approx(1600)
    assert amounts["final_amount"] == pytest.approx(6400)


def test_export_invoice_pdf_writes_file(tmp_path):
    data = {
        "title": "Landing page",
        "status": "completed",
        "payment_status": "released",
        "client_label": "Company",
        "client": "Acme Ltd",
        "developer": "Ada Lovelace",
        "created_at": None,
        "completed_at": None,
        "payment_date": None,
        "total_amount": 5000,
        "platform_fee": 500,
        "final_amount": 4500,
        "fee_rate": 0.1,
    }
    out = export_invoice_pdf(data, tmp_path / "nested" / "invoice.pdf")
    assert out.read_bytes().startswith(b"%PDF")


@pytest.fixture
def assigned(client, make_project, org, dev, bid_on, auth):
    p = make_project(org)
    bid_on(dev, p["id"], amount=5000)
    r = client.post(f"/projects/{p['id']}/assign", json={"developerId": dev.id}, headers=auth(org))
    assert r.status_code == 200, r.text
    return r.json()["data"]


def test_invoice_download_for_owner_and_assignee(client, assigned, org, dev, auth):
    for user in (org, dev):
        r = client.get(f"/projects/{assigned['id']}/invoice", headers=auth(user))
        assert r.status_code == 200
        assert r.headers["content-type"] == "application/pdf"
        assert f"invoice-{assigned['id']}.pdf" in r.headers["content-disposition"]
        assert r.content.startswith(b"%PDF")
    # generated files are removed once sent
    assert os.listdir(settings.EXPORT_DIR) == []


def test_invoice_download_forbidden_for_stranger(client, assigned, dev2, auth):
    r = client.get(f"/projects/{assigned['id']}/invoice", headers=auth(dev2))
    assert r.status_code == 403


def test_invoice_download_missing_project(client, org, auth):
    assert client.get("/projects/404/invoice", headers=auth(org)).status_code == 404
