"""
Expense Log Menu Package

This package provides the interactive command-line menu for recording
expenses and viewing daily, weekly and monthly totals.
"""
from expense_log.menu.main import ExpenseMenu, main

__all__ = ['ExpenseMenu', 'main']
