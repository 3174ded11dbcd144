from sqlalchemy import String, Boolean, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from enum import Enum

from axion.db.base import Base
from axion.db.models._mixins import TimestampMixin

class Role(str, Enum):
    admin = "admin"
    seller = "seller"
    production = "production"

class User(Base, TimestampMixin):
    __tablename__ = "user"

    id: Mapped[int] = mapped_column(primary_key=True)
    login: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    email: Mapped[str | None] = mapped_column(String(256), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(256))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    roles = relationship("UserRole", back_populates="user", cascade="all, delete-orphan", lazy="selectin")
    collaborator = relationship(
        "CollaboratorSettings", back_populates="user", uselist=False, cascade="all, delete-orphan", lazy="selectin"
    )

    @property
    def role_names(self) -> list[str]:
        return sorted(r.role for r in self.roles)

class UserRole(Base):
    __tablename__ = "user_role"
    __table_args__ = (UniqueConstraint("user_id", "role", name="uq_user_role_user_role"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("user.id", ondelete="CASCADE"), index=True)
    role: Mapped[str] = mapped_column(String(32))  # admin|seller|production

    user = relationship("User", back_populates="roles")

class CollaboratorSettings(Base, TimestampMixin):
    """Compensation terms: fixed monthly cost for anyone, commission percent for sellers."""
    __tablename__ = "collaborator_settings"

    user_id: Mapped[int] = mapped_column(ForeignKey("user.id", ondelete="CASCADE"), primary_key=True)
    username: Mapped[str | None] = mapped_column(String(64), nullable=True)
    commission_percent: Mapped[float | None] = mapped_column(Float, nullable=True)
    commission_fixed: Mapped[float | None] = mapped_column(Float, nullable=True)

    user = relationship("User", back_populates="collaborator")
