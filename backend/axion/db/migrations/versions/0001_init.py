"""init

Revision ID: 0001_init
Revises:
Create Date: 2026-01-12

"""
from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
    ]


def upgrade():
    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("login", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=True),
        sa.Column("email", sa.String(length=256), nullable=True),
        sa.Column("password_hash", sa.String(length=256), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_timestamps(),
    )
    op.create_index("ix_user_login", "user", ["login"], unique=True)

    op.create_table(
        "user_role",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.UniqueConstraint("user_id", "role", name="uq_user_role_user_role"),
    )
    op.create_index("ix_user_role_user_id", "user_role", ["user_id"])

    op.create_table(
        "collaborator_settings",
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("user.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("username", sa.String(length=64), nullable=True),
        sa.Column("commission_percent", sa.Float(), nullable=True),
        sa.Column("commission_fixed", sa.Float(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "legacy_project",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("client", sa.String(length=256), nullable=False, server_default=""),
        sa.Column("responsible", sa.String(length=256), nullable=False, server_default=""),
        sa.Column("total_value", sa.Float(), nullable=False, server_default="0"),
        sa.Column("paid_value", sa.Float(), nullable=False, server_default="0"),
        sa.Column("billing_type", sa.String(length=16), nullable=False, server_default="single"),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="backlog"),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.Column("briefing", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "flow_card",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("client_name", sa.String(length=256), nullable=False),
        sa.Column("whatsapp", sa.String(length=32), nullable=True),
        sa.Column("leads_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("entry_value", sa.Float(), nullable=False, server_default="0"),
        sa.Column("received_value", sa.Float(), nullable=False, server_default="0"),
        sa.Column("payment_method", sa.String(length=64), nullable=True),
        sa.Column("category", sa.String(length=128), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="leads"),
        sa.Column("created_by_id", sa.Integer(), sa.ForeignKey("user.id", ondelete="SET NULL"), nullable=True),
        sa.Column("created_by_name", sa.String(length=256), nullable=True),
        sa.Column("attendant_id", sa.Integer(), sa.ForeignKey("user.id", ondelete="SET NULL"), nullable=True),
        sa.Column("attendant_name", sa.String(length=256), nullable=True),
        sa.Column("production_responsible_id", sa.Integer(), sa.ForeignKey("user.id", ondelete="SET NULL"), nullable=True),
        sa.Column("production_responsible_name", sa.String(length=256), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_flow_card_date", "flow_card", ["date"])
    op.create_index("ix_flow_card_status", "flow_card", ["status"])
    op.create_index("ix_flow_card_attendant_id", "flow_card", ["attendant_id"])

    op.create_table(
        "financial_transaction",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("category", sa.String(length=128), nullable=False, server_default=""),
        sa.Column("cost_center", sa.String(length=128), nullable=False, server_default=""),
        sa.Column("description", sa.String(length=512), nullable=False, server_default=""),
        sa.Column("value", sa.Float(), nullable=False, server_default="0"),
        sa.Column("received_value", sa.Float(), nullable=False, server_default="0"),
        sa.Column("pending_value", sa.Float(), nullable=False, server_default="0"),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("legacy_project.id", ondelete="SET NULL"), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_financial_transaction_type", "financial_transaction", ["type"])
    op.create_index("ix_financial_transaction_date", "financial_transaction", ["date"])

    op.create_table(
        "app_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_name", sa.String(length=256), nullable=False),
        sa.Column("currency", sa.String(length=8), nullable=False, server_default="BRL"),
        sa.Column("tax_rate", sa.Float(), nullable=False, server_default="15"),
        sa.Column("signup_enabled", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        *_timestamps(),
    )


def downgrade():
    op.drop_table("app_settings")
    op.drop_table("financial_transaction")
    op.drop_table("flow_card")
    op.drop_table("legacy_project")
    op.drop_table("collaborator_settings")
    op.drop_table("user_role")
    op.drop_table("user")
