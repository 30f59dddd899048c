from salestrack.routers.account import router as account_router
from salestrack.routers.health import router as health_router
from salestrack.routers.reports import router as reports_router
from salestrack.routers.sales import router as sales_router

__all__ = [
    "account_router",
    "health_router",
    "reports_router",
    "sales_router",
]
