import datetime as dt

from axion.db.models.app_settings import AppSettings
from axion.db.models.flow_card import FlowCard
from axion.db.models.transaction import FinancialTransaction
from axion.schemas.admin import UserCreateIn
from axion.schemas.snapshot import CardRecord, DateRange, KpiSnapshot
from axion.crud.users import create_user
from axion.services.reports.service import dashboard_kpis, dre, legacy_metrics, rank_sellers, seller_ranking, DASHBOARD_FIELDS

MARCH = DateRange(start="2024-03-01", end="2024-03-31")

def _seed(db):
    seller = create_user(db, UserCreateIn(
        login="ana", password="secret1", roles=["seller"], name="Ana", commission_percent=10, commission_fixed=1000,
    ))
    db.add(AppSettings(company_name="Acme", currency="BRL", tax_rate=15.0, signup_enabled=False))
    db.add(FlowCard(
        date=dt.date(2024, 3, 15), client_name="Cliente", entry_value=2000, status="concluido",
        attendant_id=seller.id, attendant_name="Ana", updated_at=dt.datetime(2024, 3, 15, 12, 0),
    ))
    db.add(FinancialTransaction(type="expense", category="Marketing", value=300, date=dt.date(2024, 3, 10)))
    db.commit()
    return seller

def test_dashboard_selects_fields(db):
    _seed(db)
    out = dashboard_kpis(db, MARCH)
    assert set(DASHBOARD_FIELDS) <= set(out)
    assert out["revenue"] == 2000
    assert out["operational_cost"] == 1500
    assert out["net_profit"] == 200
    assert (out["date_from"], out["date_to"]) == ("2024-03-01", "2024-03-31")

def test_dashboard_defaults_to_current_month(db):
    out = dashboard_kpis(db, today=dt.date(2024, 3, 15))
    assert (out["date_from"], out["date_to"]) == ("2024-03-01", "2024-03-15")
    assert out["tax_rate"] == 15.0

def test_dre_rows(db):
    _seed(db)
    out = dre(db, MARCH)
    assert out["company_name"] == "Acme"
    assert out["period_label"] == "01/03/2024 a 31/03/2024"
    labels = [r["label"] for r in out["rows"]]
    assert labels[:4] == ["Receita Bruta", "(-) Custos Operacionais", "(-) Impostos (15,0%)", "Lucro Líquido"]
    assert out["rows"][0]["value"] == "R$ 2.000,00"
    assert out["rows"][3]["tone"] == "success"
    assert out["expenses_by_category"] == [{"name": "Marketing", "amount": 300, "percentage": 100.0}]

def test_dre_defaults_to_last_days(db):
    out = dre(db, today=dt.date(2024, 3, 31))
    assert (out["date_from"], out["date_to"]) == ("2024-03-01", "2024-03-31")
    assert out["rows"][3]["tone"] == "success"

def test_legacy_metrics_include_projects():
    snap = KpiSnapshot.model_validate({
        "cards": [{"status": "aguardando_pagamento", "entryValue": 100}],
        "projects": [{"totalValue": 1000, "paidValue": 250, "status": "production"}],
        "dateRange": {"start": "2024-03-01", "end": "2024-03-31"},
    })
    out = legacy_metrics(snap)
    assert out["receivables"] == 850
    assert out["legacy_receivables"] == 750
    assert out["active_projects"] == 2
    assert out["monthly_revenue"] == 0

def test_rank_sellers_orders_by_revenue():
    cards = [
        CardRecord.model_validate({"status": "concluido", "entryValue": 100, "attendantId": "1", "attendantName": "Ana", "date": "2024-03-10"}),
        CardRecord.model_validate({"status": "concluido", "entryValue": 500, "attendantId": "2", "attendantName": "Bia", "date": "2024-03-11"}),
        CardRecord.model_validate({"status": "leads", "entryValue": 900, "attendantId": "1", "attendantName": "Ana", "date": "2024-03-12"}),
        CardRecord.model_validate({"status": "concluido", "entryValue": 999, "attendantId": "3", "date": "2024-01-01"}),
    ]
    rows = rank_sellers(cards, MARCH, current_user_id="1")
    assert [r["id"] for r in rows] == ["2", "1"]
    assert rows[0]["deals_won"] == 1
    assert rows[1]["revenue"] == 100
    assert rows[1]["is_current_user"] is True
    assert rows[0]["is_current_user"] is False

def test_rank_sellers_counts_cards_after_range_end():
    cards = [CardRecord.model_validate({"status": "concluido", "entryValue": 10, "date": "2024-05-01"})]
    rows = rank_sellers(cards, MARCH)
    assert rows[0]["name"] == "—"
    assert rows[0]["id"] == "unknown"
    assert rows[0]["revenue"] == 10

def test_seller_ranking_from_db(db):
    seller = _seed(db)
    out = seller_ranking(db, current_user_id=seller.id, today=dt.date(2024, 3, 31))
    assert out["rows"][0]["name"] == "Ana"
    assert out["rows"][0]["is_current_user"] is True
