from expense_log.storage.models import Category, Expense, normalize_category
from expense_log.storage.manager import ExpenseManager

__all__ = [
    'Category',
    'Expense',
    'normalize_category',
    'ExpenseManager',
]
