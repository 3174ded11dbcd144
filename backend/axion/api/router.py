from fastapi import APIRouter
from axion.api.routers import auth, admin, flow_cards, transactions, app_settings, projects, reports

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(flow_cards.router, prefix="/flow-cards", tags=["flow-cards"])
api_router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
api_router.include_router(app_settings.router, prefix="/settings", tags=["settings"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
