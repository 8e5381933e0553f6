"""Pydantic schemas for API requests and responses. Not persisted to DB."""
from finance_tracker.schemas.auth import (LoginData, LoginRequest, UserData,
                                          UserInfo, UserSummary)
from finance_tracker.schemas.common import (ApiModel, ApiResponse,
                                            PaginationInfo)
from finance_tracker.schemas.earnings import (EarningCreate, EarningData,
                                              EarningListData, EarningRead,
                                              EarningStats, EarningUpdate)
from finance_tracker.schemas.expenses import (CategoryExpenseStats,
                                              CategoryTransactionsData,
                                              DailyExpense, DailyExpensesData,
                                              ExpenseBatchCreate,
                                              ExpenseCreate, ExpenseData,
                                              ExpenseListData, ExpenseRead,
                                              ExpensesCreatedData,
                                              ExpenseStats, ExpenseUpdate,
                                              TopCategoriesData, TopCategory)
from finance_tracker.schemas.lookups import (CategoryCreate, CategoryData,
                                             CategoryListData, CategoryRead,
                                             CategoryUpdate, TypeCreate,
                                             TypeData, TypeListData, TypeRead,
                                             TypeUpdate)
from finance_tracker.schemas.savings import (SavingCreate, SavingData,
                                             SavingListData, SavingRead,
                                             SavingStats, SavingUpdate)

__all__ = [
    "ApiModel",
    "ApiResponse",
    "CategoryCreate",
    "CategoryData",
    "CategoryExpenseStats",
    "CategoryListData",
    "CategoryRead",
    "CategoryTransactionsData",
    "CategoryUpdate",
    "DailyExpense",
    "DailyExpensesData",
    "EarningCreate",
    "EarningData",
    "EarningListData",
    "EarningRead",
    "EarningStats",
    "EarningUpdate",
    "ExpenseBatchCreate",
    "ExpenseCreate",
    "ExpenseData",
    "ExpenseListData",
    "ExpenseRead",
    "ExpenseStats",
    "ExpenseUpdate",
    "ExpensesCreatedData",
    "LoginData",
    "LoginRequest",
    "PaginationInfo",
    "SavingCreate",
    "SavingData",
    "SavingListData",
    "SavingRead",
    "SavingStats",
    "SavingUpdate",
    "TopCategoriesData",
    "TopCategory",
    "TypeCreate",
    "TypeData",
    "TypeListData",
    "TypeRead",
    "TypeUpdate",
    "UserData",
    "UserInfo",
    "UserSummary",
]
