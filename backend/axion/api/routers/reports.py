import datetime as dt
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from axion.core.deps import get_db, require_roles
from axion.core.logging import logger
from axion.db.models.user import Role
from axion.schemas.reports import DashboardKpisOut, DreOut, LegacyMetricsOut, SellerRankingOut
from axion.schemas.snapshot import DateRange, KpiSnapshot
from axion.services.reports.service import (
    dashboard_kpis as dashboard_calc,
    dre as dre_calc,
    legacy_metrics as legacy_calc,
    seller_ranking as ranking_calc,
)
from axion.services.exports.exporter import export_dre_pdf, export_dre_xlsx, default_export_path

router = APIRouter()

def _date_range(date_from: dt.date | None, date_to: dt.date | None) -> DateRange | None:
    """None means "use the view's default period"."""
    if date_from is None and date_to is None:
        return None
    if date_from is None or date_to is None:
        raise HTTPException(status_code=422, detail="date_from and date_to must be given together")
    try:
        return DateRange.of(date_from, date_to)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

@router.get("/dashboard", response_model=DashboardKpisOut)
def dashboard(
    date_from: dt.date | None = Query(None),
    date_to: dt.date | None = Query(None),
    db: Session = Depends(get_db),
    _user=Depends(require_roles(Role.admin)),
):
    return dashboard_calc(db, _date_range(date_from, date_to))

@router.get("/dre", response_model=DreOut)
def dre(
    date_from: dt.date | None = Query(None),
    date_to: dt.date | None = Query(None),
    db: Session = Depends(get_db),
    _user=Depends(require_roles(Role.admin)),
):
    return dre_calc(db, _date_range(date_from, date_to))

@router.get("/dre/export.pdf")
def export_dre_as_pdf(
    date_from: dt.date | None = Query(None),
    date_to: dt.date | None = Query(None),
    db: Session = Depends(get_db),
    _user=Depends(require_roles(Role.admin)),
):
    data = dre_calc(db, _date_range(date_from, date_to))
    out = default_export_path(f"dre_{data['date_from']}_{data['date_to']}", "pdf")
    export_dre_pdf(data, out)
    logger.info("dre_exported", fmt="pdf", path=str(out))
    return FileResponse(str(out), media_type="application/pdf", filename=out.name)

@router.get("/dre/export.xlsx")
def export_dre_as_xlsx(
    date_from: dt.date | None = Query(None),
    date_to: dt.date | None = Query(None),
    db: Session = Depends(get_db),
    _user=Depends(require_roles(Role.admin)),
):
    data = dre_calc(db, _date_range(date_from, date_to))
    out = default_export_path(f"dre_{data['date_from']}_{data['date_to']}", "xlsx")
    export_dre_xlsx(data, out)
    logger.info("dre_exported", fmt="xlsx", path=str(out))
    return FileResponse(str(out), media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", filename=out.name)

@router.post("/legacy-metrics", response_model=LegacyMetricsOut)
def legacy_metrics(snapshot: KpiSnapshot, _user=Depends(require_roles(Role.admin))):
    return legacy_calc(snapshot)

@router.get("/seller-ranking", response_model=SellerRankingOut)
def seller_ranking(db: Session = Depends(get_db), user=Depends(require_roles(Role.admin, Role.seller))):
    return ranking_calc(db, current_user_id=user.id)
