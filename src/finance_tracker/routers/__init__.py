"""API routers, all mounted under the API prefix.

Includes routes for:
- /auth - Firebase login, current user, logout
- /expenses - Expenses plus daily / top-category / per-category analytics
- /earnings - Earnings with per-type totals
- /savings - Savings with added / withdrawn / net totals
- /expense-categories, /expense-types - Per-user lookups referenced by expenses
"""
from finance_tracker.routers.auth import router as auth_router
from finance_tracker.routers.categories import router as categories_router
from finance_tracker.routers.earnings import router as earnings_router
from finance_tracker.routers.expense_types import router as types_router
from finance_tracker.routers.expenses import router as expenses_router
from finance_tracker.routers.savings import router as savings_router

__all__ = [
    "auth_router",
    "expenses_router",
    "earnings_router",
    "savings_router",
    "categories_router",
    "types_router",
]
