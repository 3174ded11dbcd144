from typing import Literal
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from axion.core.deps import get_db, require_roles
from axion.db.models.user import Role
from axion.schemas.transactions import TransactionIn, TransactionUpdate, TransactionOut
from axion.crud.transactions import (
    list_transactions,
    get_transaction,
    create_transaction,
    update_transaction,
    delete_transaction,
)

router = APIRouter()

def _tx_or_404(db: Session, tx_id: int):
    t = get_transaction(db, tx_id)
    if not t:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return t

@router.get("", response_model=list[TransactionOut])
def get_transactions(
    type: Literal["income", "expense"] | None = Query(None),
    db: Session = Depends(get_db),
    _user=Depends(require_roles(Role.admin)),
):
    return list_transactions(db, tx_type=type)

@router.post("", response_model=TransactionOut)
def post_transaction(data: TransactionIn, db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin))):
    return create_transaction(db, data)

@router.patch("/{tx_id}", response_model=TransactionOut)
def patch_transaction(
    tx_id: int,
    data: TransactionUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_roles(Role.admin)),
):
    return update_transaction(db, _tx_or_404(db, tx_id), data)

@router.delete("/{tx_id}")
def remove_transaction(tx_id: int, db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin))):
    delete_transaction(db, _tx_or_404(db, tx_id))
    return {"status": "ok"}
