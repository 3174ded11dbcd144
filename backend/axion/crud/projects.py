import datetime as dt
from sqlalchemy.orm import Session
from axion.db.models.legacy_project import LegacyProject
from axion.schemas.projects import LegacyProjectCreate
from axion.schemas.transactions import TransactionIn
from axion.crud.transactions import create_transaction

PROJECT_PAYMENT_CATEGORY = "Recebimento de Projeto"

def list_projects(db: Session):
    return db.query(LegacyProject).order_by(LegacyProject.id).all()

def get_project(db: Session, project_id: int) -> LegacyProject | None:
    return db.query(LegacyProject).filter(LegacyProject.id == project_id).one_or_none()

def create_project(db: Session, data: LegacyProjectCreate) -> LegacyProject:
    p = LegacyProject(**data.model_dump())
    db.add(p)
    db.commit()
    db.refresh(p)
    return p

def outstanding(p: LegacyProject) -> float:
    return max(0.0, (p.total_value or 0.0) - (p.paid_value or 0.0))

def receive_payment(db: Session, p: LegacyProject, amount: float, today: dt.date) -> tuple[LegacyProject, float]:
    """Books a payment against the project and records the matching income entry.

    The amount is capped at the outstanding balance; returns the project and the
    amount actually received.
    """
    received = min(amount, outstanding(p))
    if received <= 0:
        return p, 0.0
    p.paid_value = (p.paid_value or 0.0) + received
    create_transaction(
        db,
        TransactionIn(
            type="income",
            category=PROJECT_PAYMENT_CATEGORY,
            description=f"Pagamento: {p.title}",
            value=received,
            date=today,
            project_id=p.id,
        ),
        commit=False,
    )
    db.commit()
    db.refresh(p)
    return p, received
