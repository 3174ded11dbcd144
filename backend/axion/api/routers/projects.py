from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from axion.core.deps import get_db, require_roles
from axion.core.logging import logger
from axion.db.models.user import Role
from axion.schemas.projects import LegacyProjectCreate, LegacyProjectOut, PaymentIn
from axion.crud.projects import create_project, list_projects, get_project, receive_payment, outstanding
from axion.services.reports.service import local_today

router = APIRouter()

@router.get("", response_model=list[LegacyProjectOut])
def get_projects(db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin, Role.production))):
    return list_projects(db)

@router.post("", response_model=LegacyProjectOut)
def post_project(data: LegacyProjectCreate, db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin))):
    return create_project(db, data)

@router.post("/{project_id}/payments", response_model=LegacyProjectOut)
def post_payment(
    project_id: int,
    data: PaymentIn,
    db: Session = Depends(get_db),
    _user=Depends(require_roles(Role.admin)),
):
    p = get_project(db, project_id)
    if not p:
        raise HTTPException(status_code=404, detail="Project not found")
    pending = outstanding(p)
    if pending <= 0:
        raise HTTPException(status_code=409, detail="Project already fully paid")
    amount = data.amount if data.amount is not None else pending
    if amount > pending:
        raise HTTPException(status_code=422, detail="Amount exceeds outstanding balance")
    p, received = receive_payment(db, p, amount, local_today())
    logger.info("project_payment_received", project_id=project_id, amount=received, paid_value=p.paid_value)
    return p
