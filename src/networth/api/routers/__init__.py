"""API routers package."""

from networth.api.routers.accounts import router as accounts_router
from networth.api.routers.balances import router as balances_router
from networth.api.routers.ledger import router as ledger_router
from networth.api.routers.charts import router as charts_router

__all__ = [
    "accounts_router",
    "balances_router",
    "ledger_router",
    "charts_router",
]
