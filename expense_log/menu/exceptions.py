"""
Custom exceptions for the Expense Log menu system.
"""

class ExpenseLogError(Exception):
    """Base exception for all Expense Log errors."""
    pass

class StorageError(ExpenseLogError):
    """Raised when the expense file cannot be read or written."""
    pass

class UserInputError(ExpenseLogError):
    """Raised when there's an error with user input."""
    pass

class OperationCancelled(UserInputError):
    """Raised when the user cancels a prompt."""
    pass
