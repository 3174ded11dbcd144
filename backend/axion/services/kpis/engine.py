"""KPI aggregation shared by the dashboard, the DRE report and the legacy metrics.

All functions here are pure: they read validated snapshot records and return
plain numbers/dicts. Nothing raises on bad data; the snapshot layer already
turned malformed values into zeros and empty dates.
"""
from typing import Iterable

from axion.schemas.snapshot import (
    CardRecord,
    TransactionRecord,
    CollaboratorRecord,
    SettingsRecord,
    LegacyProjectRecord,
    LeadRecord,
    DateRange,
)
from axion.services.kpis.periods import within_range, proration_factor, prorated_fixed_cost

# Cards count as revenue once work reaches production or is done, dated by their last transition.
REVENUE_STATUSES = frozenset({"em_producao", "concluido"})
CONVERTED_STATUSES = frozenset({"em_producao", "revisao", "concluido"})
RECEIVABLE_STATUS = "aguardando_pagamento"
DONE_STATUS = "concluido"
LEGACY_DONE_STATUS = "completed"
LEAD_WON_STAGE = "won"

TRAFFIC_KEYWORDS = ("tráfego", "trafego", "ads")
UNCATEGORIZED = "Sem categoria"


def is_traffic_category(category: str | None) -> bool:
    cat = (category or "").lower()
    return any(k in cat for k in TRAFFIC_KEYWORDS)


def _card_in_period(card: CardRecord, date_range: DateRange) -> bool:
    return within_range(card.updated_at[:10], date_range.start, date_range.end)


def _tx_in_period(tx: TransactionRecord, date_range: DateRange) -> bool:
    return within_range(tx.date, date_range.start, date_range.end)


# ─── Revenue ───

def card_revenue(cards: Iterable[CardRecord], date_range: DateRange) -> float:
    return sum(
        (c.entry_value for c in cards if c.status in REVENUE_STATUSES and _card_in_period(c, date_range)),
        0.0,
    )


def transaction_total(transactions: Iterable[TransactionRecord], tx_type: str, date_range: DateRange) -> float:
    return sum((t.value for t in transactions if t.type == tx_type and _tx_in_period(t, date_range)), 0.0)


def revenue_breakdown(
    cards: list[CardRecord],
    transactions: list[TransactionRecord],
    date_range: DateRange,
) -> dict:
    flow = card_revenue(cards, date_range)
    income = transaction_total(transactions, "income", date_range)
    return dict(card_revenue=flow, transaction_income=income, revenue=flow + income)


# ─── Costs ───

def traffic_costs(transactions: Iterable[TransactionRecord], date_range: DateRange) -> float:
    return sum(
        (
            t.value
            for t in transactions
            if t.type == "expense" and _tx_in_period(t, date_range) and is_traffic_category(t.category)
        ),
        0.0,
    )


def commission_paid(
    cards: Iterable[CardRecord],
    collaborators: Iterable[CollaboratorRecord],
    date_range: DateRange,
) -> float:
    percent_by_id = {c.id: c.commission_percent for c in collaborators if c.id}
    total = 0.0
    for c in cards:
        if c.status != DONE_STATUS or not _card_in_period(c, date_range):
            continue
        # unassigned cards and removed sellers earn nothing
        pct = percent_by_id.get(c.attendant_id, 0.0) if c.attendant_id else 0.0
        total += c.entry_value * (pct / 100)
    return total


def expenses_by_category(transactions: Iterable[TransactionRecord], date_range: DateRange) -> dict[str, float]:
    out: dict[str, float] = {}
    for t in transactions:
        if t.type != "expense" or not _tx_in_period(t, date_range):
            continue
        key = t.category or UNCATEGORIZED
        out[key] = out.get(key, 0.0) + t.value
    return dict(sorted(out.items(), key=lambda kv: (-kv[1], kv[0])))


def cost_breakdown(
    cards: list[CardRecord],
    transactions: list[TransactionRecord],
    collaborators: list[CollaboratorRecord],
    date_range: DateRange,
) -> dict:
    expenses = transaction_total(transactions, "expense", date_range)
    factor = proration_factor(date_range)
    fixed = prorated_fixed_cost(collaborators, date_range)
    commissions = commission_paid(cards, collaborators, date_range)
    return dict(
        transaction_expenses=expenses,
        # subset of transaction_expenses, reported for ROI only
        traffic_costs=traffic_costs(transactions, date_range),
        proration_factor=factor,
        fixed_cost=fixed,
        commission_paid=commissions,
        operational_cost=expenses + fixed + commissions,
    )


# ─── Derived ───

def profit(revenue: float, operational_cost: float, tax_rate: float) -> dict:
    tax_amount = revenue * (tax_rate / 100)
    return dict(tax_amount=tax_amount, net_profit=revenue - operational_cost - tax_amount)


def traffic_roi(card_revenue_value: float, traffic_costs_value: float) -> float:
    if traffic_costs_value <= 0:
        return 0.0
    return (card_revenue_value - traffic_costs_value) / traffic_costs_value * 100


def legacy_receivables(projects: Iterable[LegacyProjectRecord]) -> float:
    return sum((p.total_value - p.paid_value for p in projects if p.total_value > p.paid_value), 0.0)


def lead_win_rate(leads: list[LeadRecord]) -> float:
    if not leads:
        return 0.0
    return sum(1 for lead in leads if lead.stage == LEAD_WON_STAGE) / len(leads) * 100


def pipeline_metrics(
    cards: list[CardRecord],
    legacy_projects: list[LegacyProjectRecord] | None = None,
    leads: list[LeadRecord] | None = None,
) -> dict:
    """Point-in-time figures; none of these depend on the reporting period.

    When cards carry no lead counts, CRM leads (if given) supply the conversion rate.
    """
    card_receivables = sum((c.entry_value for c in cards if c.status == RECEIVABLE_STATUS), 0.0)
    active = sum(1 for c in cards if c.status != DONE_STATUS)
    total_leads = sum(c.leads_count for c in cards)
    converted = sum(1 for c in cards if c.status in CONVERTED_STATUSES)
    if total_leads > 0:
        conversion = converted / total_leads * 100
    else:
        conversion = lead_win_rate(leads or [])

    legacy = 0.0
    if legacy_projects is not None:
        legacy = legacy_receivables(legacy_projects)
        active += sum(1 for p in legacy_projects if p.status != LEGACY_DONE_STATUS)

    return dict(
        receivables=card_receivables + legacy,
        legacy_receivables=legacy,
        active_projects=active,
        total_leads=total_leads,
        converted_count=converted,
        conversion_rate=conversion,
    )


def compute_kpis(
    cards: list[CardRecord],
    transactions: list[TransactionRecord],
    collaborators: list[CollaboratorRecord],
    app_settings: SettingsRecord,
    date_range: DateRange,
    legacy_projects: list[LegacyProjectRecord] | None = None,
    leads: list[LeadRecord] | None = None,
) -> dict:
    rev = revenue_breakdown(cards, transactions, date_range)
    costs = cost_breakdown(cards, transactions, collaborators, date_range)
    tax_rate = app_settings.tax_rate
    return dict(
        date_from=date_range.start,
        date_to=date_range.end,
        **rev,
        **costs,
        tax_rate=tax_rate,
        **profit(rev["revenue"], costs["operational_cost"], tax_rate),
        **pipeline_metrics(cards, legacy_projects, leads),
        traffic_roi=traffic_roi(rev["card_revenue"], costs["traffic_costs"]),
        expenses_by_category=expenses_by_category(transactions, date_range),
    )
