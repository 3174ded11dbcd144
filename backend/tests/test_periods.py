import datetime as dt
import pytest
from pydantic import ValidationError

from axion.schemas.snapshot import DateRange, CollaboratorRecord
from axion.services.kpis.periods import (
    within_range,
    days_between_inclusive,
    proration_factor,
    prorated_fixed_cost,
    current_month_range,
    last_days_range,
)

def test_range_bounds_are_inclusive():
    assert within_range("2024-03-01", "2024-03-01", "2024-03-31")
    assert within_range("2024-03-31", "2024-03-01", "2024-03-31")
    assert within_range("2024-03-31T23:59:59", "2024-03-01", "2024-03-31")
    assert not within_range("2024-02-29", "2024-03-01", "2024-03-31")
    assert not within_range("2024-04-01", "2024-03-01", "2024-03-31")

def test_empty_date_is_never_in_range():
    assert not within_range("", "0000-01-01", "9999-12-31")
    assert not within_range(None, "0000-01-01", "9999-12-31")

def test_days_between_inclusive():
    assert days_between_inclusive("2024-03-01", "2024-03-01") == 1
    assert days_between_inclusive("2024-03-01", "2024-03-31") == 31
    assert days_between_inclusive("garbage", "2024-03-31") == 1

def test_full_month_factor_is_one():
    assert proration_factor(DateRange(start="2024-03-01", end="2024-03-31")) == 1.0

def test_partial_month_factor():
    # 15 of March's 31 days
    f = proration_factor(DateRange(start="2024-03-01", end="2024-03-15"))
    assert abs(f - 15 / 31) < 1e-9
    assert abs(f - 0.4839) < 1e-3

def test_factor_is_capped_for_long_ranges():
    assert proration_factor(DateRange(start="2024-02-01", end="2024-04-30")) == 1.0

def test_factor_uses_start_month_length():
    # 29 days from Feb 1st in a leap year is the whole of February
    assert proration_factor(DateRange(start="2024-02-01", end="2024-02-29")) == 1.0
    assert abs(proration_factor(DateRange(start="2023-02-01", end="2023-02-14")) - 0.5) < 1e-9

def test_prorated_fixed_cost():
    team = [CollaboratorRecord(id="1", commission_fixed=2000), CollaboratorRecord(id="2", commission_fixed=None)]
    r = DateRange(start="2024-03-01", end="2024-03-31")
    assert prorated_fixed_cost(team, r) == 2000.0
    assert prorated_fixed_cost([], r) == 0.0

def test_date_range_rejects_inverted_and_bad_dates():
    with pytest.raises(ValidationError):
        DateRange(start="2024-03-31", end="2024-03-01")
    with pytest.raises(ValidationError):
        DateRange(start="31/03/2024", end="2024-04-01")

def test_default_ranges():
    today = dt.date(2024, 3, 15)
    m = current_month_range(today)
    assert (m.start, m.end) == ("2024-03-01", "2024-03-15")
    d = last_days_range(30, today)
    assert (d.start, d.end) == ("2024-02-14", "2024-03-15")
