import datetime as dt
from types import SimpleNamespace

from axion.core.deps import get_current_user
from axion.main import app

WIDE = {"date_from": "2000-01-01", "date_to": "2100-12-31"}

def _card(client, **kw):
    payload = dict(date=dt.date.today().isoformat(), client_name="Cliente", entry_value=1000, leads_count=1)
    payload.update(kw)
    r = client.post("/flow-cards", json=payload)
    assert r.status_code == 200, r.text
    return r.json()

def test_healthz(client):
    assert client.get("/healthz").json()["status"] == "ok"

def test_moving_card_to_production_counts_as_revenue(client):
    card = _card(client)
    assert client.get("/reports/dashboard", params=WIDE).json()["revenue"] == 0

    r = client.post(f"/flow-cards/{card['id']}/move", json={"status": "em_producao"})
    assert r.status_code == 200
    assert r.json()["status"] == "em_producao"

    k = client.get("/reports/dashboard", params=WIDE).json()
    assert k["revenue"] == 1000
    assert k["conversion_rate"] == 100
    assert k["active_projects"] == 1

def test_awaiting_payment_card_is_receivable(client):
    _card(client, status="aguardando_pagamento", entry_value=450)
    k = client.get("/reports/dashboard", params=WIDE).json()
    assert k["receivables"] == 450
    assert k["revenue"] == 0

def test_move_unknown_card_is_404(client):
    assert client.post("/flow-cards/999/move", json={"status": "concluido"}).status_code == 404

def test_move_rejects_unknown_status(client):
    card = _card(client)
    assert client.post(f"/flow-cards/{card['id']}/move", json={"status": "arquivado"}).status_code == 422

def test_project_payment_books_income(client):
    r = client.post("/projects", json={"title": "Site", "total_value": 1000, "paid_value": 200, "status": "production"})
    assert r.status_code == 200, r.text
    pid = r.json()["id"]

    assert client.post(f"/projects/{pid}/payments", json={"amount": 5000}).status_code == 422

    r = client.post(f"/projects/{pid}/payments", json={"amount": 300})
    assert r.status_code == 200
    assert r.json()["paid_value"] == 500

    txs = client.get("/transactions", params={"type": "income"}).json()
    assert len(txs) == 1
    assert txs[0]["value"] == 300
    assert txs[0]["category"] == "Recebimento de Projeto"
    assert txs[0]["project_id"] == pid

    r = client.post(f"/projects/{pid}/payments", json={})
    assert r.json()["paid_value"] == 1000
    assert client.post(f"/projects/{pid}/payments", json={}).status_code == 409

def test_dre_endpoint_and_range_validation(client):
    r = client.put("/settings", json={"company_name": "Acme", "currency": "BRL", "tax_rate": 10, "signup_enabled": False})
    assert r.status_code == 200
    client.post("/transactions", json={"type": "income", "value": 1000, "date": "2024-03-05"})
    client.post("/transactions", json={"type": "expense", "value": 200, "category": "Aluguel", "date": "2024-03-06"})

    r = client.get("/reports/dre", params={"date_from": "2024-03-01", "date_to": "2024-03-31"})
    assert r.status_code == 200
    d = r.json()
    assert d["company_name"] == "Acme"
    assert d["gross_revenue"] == 1000
    assert d["tax_amount"] == 100
    assert d["net_profit"] == 700
    assert d["rows"][2]["label"] == "(-) Impostos (10,0%)"

    assert client.get("/reports/dre", params={"date_from": "2024-03-31", "date_to": "2024-03-01"}).status_code == 422
    assert client.get("/reports/dre", params={"date_from": "2024-03-01"}).status_code == 422

def test_dre_exports(client):
    params = {"date_from": "2024-03-01", "date_to": "2024-03-31"}
    r = client.get("/reports/dre/export.pdf", params=params)
    assert r.status_code == 200
    assert r.content[:4] == b"%PDF"
    r = client.get("/reports/dre/export.xlsx", params=params)
    assert r.status_code == 200
    assert r.content[:2] == b"PK"

def test_legacy_metrics_endpoint(client):
    body = {
        "flowCards": [{"status": "concluido", "entryValue": 500, "updatedAt": "2024-03-10", "leadsCount": 2}],
        "transactions": [{"type": "expense", "value": 100, "category": "Tráfego", "date": "2024-03-11"}],
        "settings": {"taxRate": 0},
        "projects": [{"totalValue": 300, "paidValue": 0, "status": "backlog"}],
        "dateRange": {"start": "2024-03-01", "end": "2024-03-31"},
    }
    r = client.post("/reports/legacy-metrics", json=body)
    assert r.status_code == 200, r.text
    m = r.json()
    assert m["monthly_revenue"] == 500
    assert m["receivables"] == 300
    assert m["traffic_roi"] == 400
    assert m["net_profit"] == 400

def test_seller_ranking_allows_sellers(client):
    seller = SimpleNamespace(id=7, login="bia", name="Bia", role_names=["seller"])
    app.dependency_overrides[get_current_user] = lambda: seller
    _card(client, status="concluido", attendant_id=7, attendant_name="Bia")
    r = client.get("/reports/seller-ranking")
    assert r.status_code == 200
    rows = r.json()["rows"]
    assert rows[0]["is_current_user"] is True
    assert rows[0]["deals_won"] == 1
    # sellers do not see the financial dashboard
    assert client.get("/reports/dashboard").status_code == 403

def test_admin_creates_collaborator(client):
    r = client.post("/admin/users", json={
        "login": "prod1", "password": "secret1", "roles": ["production"], "commission_percent": 30, "commission_fixed": 1500,
    })
    assert r.status_code == 200, r.text
    assert client.post("/admin/users", json={"login": "prod1", "password": "secret1", "roles": ["seller"]}).status_code == 409
    team = client.get("/admin/collaborators").json()
    member = next(m for m in team if m["login"] == "prod1")
    # percent is a seller-only setting
    assert member["commission_percent"] is None
    assert member["commission_fixed"] == 1500

def test_login_issues_token_with_roles(client, db):
    from axion.crud.users import create_user
    from axion.core.security import decode_token
    from axion.schemas.admin import UserCreateIn

    create_user(db, UserCreateIn(login="ana", password="secret1", roles=["seller", "production"]))
    assert client.post("/auth/login", json={"login": "ana", "password": "wrong"}).status_code == 401
    r = client.post("/auth/login", json={"login": "ana", "password": "secret1"})
    assert r.status_code == 200
    payload = decode_token(r.json()["access_token"])
    assert payload["sub"] == "ana"
    assert payload["roles"] == ["production", "seller"]

def test_patch_rejects_null_on_required_fields(client):
    card = _card(client)
    for field in ("status", "client_name", "entry_value", "leads_count", "date"):
        r = client.patch(f"/flow-cards/{card['id']}", json={field: None})
        assert r.status_code == 422, field
    r = client.patch(f"/flow-cards/{card['id']}", json={"notes": "ok", "deadline": None, "entry_value": 1500})
    assert r.status_code == 200
    assert r.json()["entry_value"] == 1500
    assert r.json()["status"] == "leads"

def test_legacy_metrics_with_traffic_entries_and_crm_leads(client):
    body = {
        "flowCards": [{"status": "concluido", "entryValue": 500, "updatedAt": "2024-03-10"}],
        "trafficEntries": [{"date": "2024-03-05", "value": 90, "taxValue": 10, "totalWithTax": 100}],
        "leads": [{"stage": "won"}, {"stage": "prospecting"}],
        "settings": {"taxRate": 0},
        "dateRange": {"start": "2024-03-01", "end": "2024-03-31"},
    }
    m = client.post("/reports/legacy-metrics", json=body).json()
    assert m["operational_cost"] == 100
    assert m["traffic_roi"] == 400
    assert m["conversion_rate"] == 50
