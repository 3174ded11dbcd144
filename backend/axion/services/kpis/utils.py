import datetime as dt
import math
from typing import Any


def to_number(v: Any) -> float:
    """Loose numeric coercion: anything missing or malformed counts as zero."""
    if v is None or v == "":
        return 0.0
    if isinstance(v, bool):
        return 1.0 if v else 0.0
    if isinstance(v, (int, float)):
        f = float(v)
    elif isinstance(v, str):
        try:
            f = float(v.strip())
        except ValueError:
            return 0.0
    else:
        try:
            f = float(v)
        except (TypeError, ValueError):
            return 0.0
    if math.isnan(f) or math.isinf(f):
        return 0.0
    return f


def to_iso(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, dt.datetime):
        return v.isoformat()
    if isinstance(v, dt.date):
        return v.isoformat()
    return str(v).strip()


def to_text(v: Any) -> str:
    if v is None:
        return ""
    return str(v).strip()


def parse_iso_date(s: str) -> dt.date | None:
    if not s:
        return None
    try:
        return dt.date.fromisoformat(s[:10])
    except (TypeError, ValueError):
        return None


def month_days(d: dt.date) -> int:
    month_start = dt.date(d.year, d.month, 1)
    if month_start.month == 12:
        next_m = dt.date(month_start.year + 1, 1, 1)
    else:
        next_m = dt.date(month_start.year, month_start.month + 1, 1)
    return (next_m - month_start).days
