from __future__ import annotations

from fintrack.models.category import Category
from fintrack.models.salary import Salary
from fintrack.models.transaction import Transaction, TransactionType
from fintrack.models.user import User

__all__ = [
    "Category",
    "Salary",
    "Transaction",
    "TransactionType",
    "User",
]
