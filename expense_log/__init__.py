"""
Expense Log - personal expense logging from the command line.
"""
__version__ = "0.1.0"
