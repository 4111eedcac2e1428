"""API route modules."""

from src.api.routes.health import router as health_router
from src.api.routes.reports import router as reports_router
from src.api.routes.services import router as services_router
from src.api.routes.transactions import router as transactions_router

__all__ = [
    "health_router",
    "services_router",
    "transactions_router",
    "reports_router",
]
