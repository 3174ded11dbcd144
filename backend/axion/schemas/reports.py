import datetime as dt
from typing import Literal
from pydantic import BaseModel

class DashboardKpisOut(BaseModel):
    date_from: dt.date
    date_to: dt.date
    revenue: float
    net_profit: float
    receivables: float
    active_projects: int
    operational_cost: float
    traffic_roi: float
    traffic_costs: float
    conversion_rate: float
    tax_rate: float

class CategoryAmount(BaseModel):
    name: str
    amount: float
    percentage: float

class DreRow(BaseModel):
    label: str
    value: str
    amount: float
    tone: Literal["default", "muted", "success", "warning", "destructive"] = "default"

class DreOut(BaseModel):
    company_name: str
    date_from: dt.date
    date_to: dt.date
    period_label: str
    gross_revenue: float
    card_revenue: float
    transaction_income: float
    transaction_expenses: float
    fixed_cost: float
    proration_factor: float
    commission_paid: float
    operational_cost: float
    tax_rate: float
    tax_amount: float
    net_profit: float
    traffic_costs: float
    traffic_roi: float
    expenses_by_category: list[CategoryAmount]
    rows: list[DreRow]

class LegacyMetricsOut(BaseModel):
    date_from: dt.date
    date_to: dt.date
    monthly_revenue: float
    active_projects: int
    net_profit: float
    receivables: float
    legacy_receivables: float
    conversion_rate: float
    operational_cost: float
    traffic_roi: float

class SellerRankingRow(BaseModel):
    id: str
    name: str
    revenue: float
    deals_won: int
    is_current_user: bool = False

class SellerRankingOut(BaseModel):
    date_from: dt.date
    date_to: dt.date
    rows: list[SellerRankingRow]
