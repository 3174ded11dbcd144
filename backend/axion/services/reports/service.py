import datetime as dt
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from axion.core.config import settings
from axion.core.logging import logger
from axion.crud.app_settings import get_app_settings
from axion.crud.flow_cards import list_flow_cards
from axion.crud.transactions import list_transactions
from axion.crud.users import list_collaborators
from axion.schemas.snapshot import (
    KpiSnapshot,
    CardRecord,
    TransactionRecord,
    CollaboratorRecord,
    SettingsRecord,
    DateRange,
)
from axion.services.kpis.engine import compute_kpis, DONE_STATUS
from axion.services.kpis.periods import current_month_range, last_days_range
from axion.utils.formatting import format_brl, format_percent, format_period

DASHBOARD_FIELDS = (
    "revenue",
    "net_profit",
    "receivables",
    "active_projects",
    "operational_cost",
    "traffic_roi",
    "traffic_costs",
    "conversion_rate",
    "tax_rate",
)


def local_today() -> dt.date:
    return dt.datetime.now(ZoneInfo(settings.TZ)).date()


def load_snapshot(db: Session) -> KpiSnapshot:
    # four independent reads; the engine runs once all of them are in
    cards = [CardRecord.model_validate(c) for c in list_flow_cards(db)]
    transactions = [TransactionRecord.model_validate(t) for t in list_transactions(db)]
    collaborators = [CollaboratorRecord.model_validate(row) for row in list_collaborators(db)]
    row = get_app_settings(db)
    app_settings = SettingsRecord.model_validate(row) if row is not None else SettingsRecord()
    return KpiSnapshot(
        cards=cards,
        transactions=transactions,
        collaborators=collaborators,
        settings=app_settings,
    )


def _kpis(snapshot: KpiSnapshot, date_range: DateRange, with_legacy: bool = False) -> dict:
    return compute_kpis(
        snapshot.cards,
        snapshot.transactions,
        snapshot.collaborators,
        snapshot.settings,
        date_range,
        legacy_projects=(snapshot.legacy_projects or []) if with_legacy else None,
        leads=snapshot.leads if with_legacy else None,
    )


# ─── Dashboard ───

def dashboard_kpis(db: Session, date_range: DateRange | None = None, today: dt.date | None = None) -> dict:
    date_range = date_range or current_month_range(today or local_today())
    k = _kpis(load_snapshot(db), date_range)
    logger.info(
        "kpis_computed",
        view="dashboard",
        date_from=date_range.start,
        date_to=date_range.end,
        revenue=k["revenue"],
        net_profit=k["net_profit"],
    )
    out = {f: k[f] for f in DASHBOARD_FIELDS}
    out.update(date_from=k["date_from"], date_to=k["date_to"])
    return out


# ─── DRE ───

def _category_rows(expenses: dict[str, float]) -> list[dict]:
    total = sum(expenses.values())
    return [
        dict(name=name, amount=amount, percentage=(amount / total * 100) if total > 0 else 0.0)
        for name, amount in expenses.items()
    ]


def dre_rows(k: dict) -> list[dict]:
    """Printable lines: the first four are the statement, the rest are details."""
    net = k["net_profit"]
    return [
        dict(label="Receita Bruta", value=format_brl(k["revenue"]), amount=k["revenue"], tone="default"),
        dict(label="(-) Custos Operacionais", value=format_brl(k["operational_cost"]), amount=k["operational_cost"], tone="destructive"),
        dict(
            label=f"(-) Impostos ({format_percent(k['tax_rate'])})",
            value=format_brl(k["tax_amount"]),
            amount=k["tax_amount"],
            tone="warning",
        ),
        dict(label="Lucro Líquido", value=format_brl(net), amount=net, tone="success" if net >= 0 else "destructive"),
        dict(label="Receita de operações", value=format_brl(k["card_revenue"]), amount=k["card_revenue"], tone="muted"),
        dict(label="Entradas lançadas", value=format_brl(k["transaction_income"]), amount=k["transaction_income"], tone="muted"),
        dict(label="Despesas lançadas", value=format_brl(k["transaction_expenses"]), amount=k["transaction_expenses"], tone="muted"),
        dict(
            label=f"Custos fixos da equipe ({format_percent(k['proration_factor'] * 100)} do mês)",
            value=format_brl(k["fixed_cost"]),
            amount=k["fixed_cost"],
            tone="muted",
        ),
        dict(label="Comissões de vendas", value=format_brl(k["commission_paid"]), amount=k["commission_paid"], tone="muted"),
        dict(label="Investimento em tráfego", value=format_brl(k["traffic_costs"]), amount=k["traffic_costs"], tone="muted"),
        dict(label="ROI de tráfego", value=format_percent(k["traffic_roi"]), amount=k["traffic_roi"], tone="muted"),
    ]


def dre(db: Session, date_range: DateRange | None = None, today: dt.date | None = None) -> dict:
    date_range = date_range or last_days_range(settings.REPORTS_DEFAULT_DAYS, today or local_today())
    snapshot = load_snapshot(db)
    k = _kpis(snapshot, date_range)
    logger.info(
        "kpis_computed",
        view="dre",
        date_from=date_range.start,
        date_to=date_range.end,
        revenue=k["revenue"],
        net_profit=k["net_profit"],
    )
    return dict(
        company_name=snapshot.settings.company_name,
        date_from=k["date_from"],
        date_to=k["date_to"],
        period_label=format_period(k["date_from"], k["date_to"]),
        gross_revenue=k["revenue"],
        card_revenue=k["card_revenue"],
        transaction_income=k["transaction_income"],
        transaction_expenses=k["transaction_expenses"],
        fixed_cost=k["fixed_cost"],
        proration_factor=k["proration_factor"],
        commission_paid=k["commission_paid"],
        operational_cost=k["operational_cost"],
        tax_rate=k["tax_rate"],
        tax_amount=k["tax_amount"],
        net_profit=k["net_profit"],
        traffic_costs=k["traffic_costs"],
        traffic_roi=k["traffic_roi"],
        expenses_by_category=_category_rows(k["expenses_by_category"]),
        rows=dre_rows(k),
    )


# ─── Legacy in-memory metrics ───

def legacy_metrics(snapshot: KpiSnapshot, today: dt.date | None = None) -> dict:
    date_range = snapshot.date_range or current_month_range(today or local_today())
    k = _kpis(snapshot, date_range, with_legacy=True)
    logger.info("kpis_computed", view="legacy", date_from=date_range.start, date_to=date_range.end)
    return dict(
        date_from=k["date_from"],
        date_to=k["date_to"],
        monthly_revenue=k["revenue"],
        active_projects=k["active_projects"],
        net_profit=k["net_profit"],
        receivables=k["receivables"],
        legacy_receivables=k["legacy_receivables"],
        conversion_rate=k["conversion_rate"],
        operational_cost=k["operational_cost"],
        traffic_roi=k["traffic_roi"],
    )


# ─── Seller ranking ───

def rank_sellers(cards: list[CardRecord], date_range: DateRange, current_user_id: str | None = None) -> list[dict]:
    """Closed deals per attendant, by nominal card date, best revenue first.

    Only the lower bound applies: cards dated after today still count.
    """
    by_seller: dict[str, dict] = {}
    for c in cards:
        if c.date[:10] < date_range.start:
            continue
        key = c.attendant_id or c.attendant_name or "unknown"
        entry = by_seller.setdefault(key, dict(id=key, name=c.attendant_name or "—", revenue=0.0, deals_won=0))
        if c.status == DONE_STATUS:
            entry["deals_won"] += 1
            entry["revenue"] += c.entry_value

    rows = sorted(by_seller.values(), key=lambda e: e["revenue"], reverse=True)
    for r in rows:
        r["is_current_user"] = bool(current_user_id) and r["id"] == current_user_id
    return rows


def seller_ranking(db: Session, current_user_id: int | None = None, today: dt.date | None = None) -> dict:
    date_range = last_days_range(settings.SELLER_RANKING_DAYS, today or local_today())
    cards = [CardRecord.model_validate(c) for c in list_flow_cards(db)]
    rows = rank_sellers(cards, date_range, str(current_user_id) if current_user_id is not None else None)
    return dict(date_from=date_range.start, date_to=date_range.end, rows=rows)
