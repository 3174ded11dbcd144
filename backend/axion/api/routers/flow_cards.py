from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from axion.core.deps import get_db, require_roles
from axion.core.logging import logger
from axion.db.models.user import Role
from axion.db.models.flow_card import FlowCardStatus
from axion.schemas.flow_cards import FlowCardCreate, FlowCardUpdate, FlowCardOut, StatusMoveIn
from axion.crud.flow_cards import (
    list_flow_cards,
    get_flow_card,
    create_flow_card,
    update_flow_card,
    move_flow_card,
    delete_flow_card,
)

router = APIRouter()

ALL_ROLES = (Role.admin, Role.seller, Role.production)

def _card_or_404(db: Session, card_id: int):
    c = get_flow_card(db, card_id)
    if not c:
        raise HTTPException(status_code=404, detail="Flow card not found")
    return c

@router.get("", response_model=list[FlowCardOut])
def get_flow_cards(
    status: FlowCardStatus | None = Query(None),
    attendant_id: int | None = Query(None),
    db: Session = Depends(get_db),
    _user=Depends(require_roles(*ALL_ROLES)),
):
    return list_flow_cards(db, status=status.value if status else None, attendant_id=attendant_id)

@router.post("", response_model=FlowCardOut)
def post_flow_card(data: FlowCardCreate, db: Session = Depends(get_db), user=Depends(require_roles(Role.admin, Role.seller))):
    return create_flow_card(db, data, created_by=user)

@router.patch("/{card_id}", response_model=FlowCardOut)
def patch_flow_card(
    card_id: int,
    data: FlowCardUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_roles(*ALL_ROLES)),
):
    return update_flow_card(db, _card_or_404(db, card_id), data)

@router.post("/{card_id}/move", response_model=FlowCardOut)
def move(card_id: int, data: StatusMoveIn, db: Session = Depends(get_db), _user=Depends(require_roles(*ALL_ROLES))):
    c = _card_or_404(db, card_id)
    previous = c.status
    c = move_flow_card(db, c, data.status.value)
    logger.info("flow_card_moved", card_id=card_id, from_status=previous, to_status=c.status)
    return c

@router.delete("/{card_id}")
def remove_flow_card(card_id: int, db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin))):
    delete_flow_card(db, _card_or_404(db, card_id))
    return {"status": "ok"}
