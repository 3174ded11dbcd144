# import all models for Alembic
from axion.db.models.user import User, UserRole, CollaboratorSettings
from axion.db.models.flow_card import FlowCard
from axion.db.models.legacy_project import LegacyProject
from axion.db.models.transaction import FinancialTransaction
from axion.db.models.app_settings import AppSettings
