from sqlalchemy.orm import Session
from axion.db.models.transaction import FinancialTransaction
from axion.schemas.transactions import TransactionIn, TransactionUpdate

def list_transactions(db: Session, tx_type: str | None = None):
    q = db.query(FinancialTransaction)
    if tx_type:
        q = q.filter(FinancialTransaction.type == tx_type)
    return q.order_by(FinancialTransaction.date.desc(), FinancialTransaction.id.desc()).all()

def get_transaction(db: Session, tx_id: int) -> FinancialTransaction | None:
    return db.query(FinancialTransaction).filter(FinancialTransaction.id == tx_id).one_or_none()

def create_transaction(db: Session, data: TransactionIn, commit: bool = True) -> FinancialTransaction:
    t = FinancialTransaction(
        type=data.type,
        category=data.category,
        cost_center=data.cost_center,
        description=data.description,
        value=data.value,
        received_value=data.received_value if data.received_value is not None else data.value,
        pending_value=data.pending_value,
        date=data.date,
        project_id=data.project_id,
    )
    db.add(t)
    if commit:
        db.commit()
        db.refresh(t)
    return t

def update_transaction(db: Session, t: FinancialTransaction, data: TransactionUpdate) -> FinancialTransaction:
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(t, field, value)
    db.commit()
    db.refresh(t)
    return t

def delete_transaction(db: Session, t: FinancialTransaction) -> None:
    db.delete(t)
    db.commit()
