"""Service layer: owner-scoped record stores and the user directory."""
from finance_tracker.services.earnings import EarningService
from finance_tracker.services.expenses import (ExpenseFilters, ExpenseService,
                                               expense_filters)
from finance_tracker.services.lookups import (LookupService,
                                              create_category_service,
                                              create_type_service)
from finance_tracker.services.query import DateRange, Page, month_window
from finance_tracker.services.savings import SavingService
from finance_tracker.services.users import UserDirectory

__all__ = [
    "DateRange",
    "EarningService",
    "ExpenseFilters",
    "ExpenseService",
    "LookupService",
    "Page",
    "SavingService",
    "UserDirectory",
    "create_category_service",
    "create_type_service",
    "expense_filters",
    "month_window",
]
