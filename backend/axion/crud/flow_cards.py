from sqlalchemy.orm import Session
from axion.db.models.flow_card import FlowCard
from axion.db.models.user import User
from axion.schemas.flow_cards import FlowCardCreate, FlowCardUpdate

def list_flow_cards(db: Session, status: str | None = None, attendant_id: int | None = None):
    q = db.query(FlowCard)
    if status:
        q = q.filter(FlowCard.status == status)
    if attendant_id is not None:
        q = q.filter(FlowCard.attendant_id == attendant_id)
    return q.order_by(FlowCard.updated_at.desc(), FlowCard.id.desc()).all()

def get_flow_card(db: Session, card_id: int) -> FlowCard | None:
    return db.query(FlowCard).filter(FlowCard.id == card_id).one_or_none()

def create_flow_card(db: Session, data: FlowCardCreate, created_by: User | None = None) -> FlowCard:
    values = data.model_dump()
    values["status"] = data.status.value
    c = FlowCard(**values)
    if created_by is not None:
        c.created_by_id = created_by.id
        c.created_by_name = created_by.name or created_by.login
    db.add(c)
    db.commit()
    db.refresh(c)
    return c

def update_flow_card(db: Session, c: FlowCard, data: FlowCardUpdate) -> FlowCard:
    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "status" and value is not None:
            value = value.value
        setattr(c, field, value)
    db.commit()
    db.refresh(c)
    return c

def move_flow_card(db: Session, c: FlowCard, status: str) -> FlowCard:
    # any stage may move to any other; the timestamp is what revenue recognition reads
    c.status = status
    db.commit()
    db.refresh(c)
    return c

def delete_flow_card(db: Session, c: FlowCard) -> None:
    db.delete(c)
    db.commit()
