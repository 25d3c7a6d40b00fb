"""API routers package."""

from customer_accounts.api.routers.accounts import router as accounts_router

__all__ = [
    "accounts_router",
]
