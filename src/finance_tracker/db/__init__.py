"""Database package: models and session management."""
from finance_tracker.db.models import (EarningTransaction, EarningType,
                                       ExpenseCategory, ExpenseTransaction,
                                       ExpenseType, LoginMedium, NeedOrWant,
                                       SavingCategory, SavingTransaction,
                                       SavingType, User)

__all__ = [
    "EarningTransaction",
    "EarningType",
    "ExpenseCategory",
    "ExpenseTransaction",
    "ExpenseType",
    "LoginMedium",
    "NeedOrWant",
    "SavingCategory",
    "SavingTransaction",
    "SavingType",
    "User",
]
