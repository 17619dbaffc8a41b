import os
import shutil
import tempfile
import builtins
from datetime import date
from decimal import Decimal

import pytest

from expense_log.storage.manager import ExpenseManager
from expense_log.storage.models import Expense


@pytest.fixture(scope="function")
def data_dir():
    path = tempfile.mkdtemp(prefix="expense_log_")
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture(scope="function")
def data_file(data_dir):
    return os.path.join(data_dir, "expenses.csv")


@pytest.fixture(scope="function")
def manager(data_file):
    return ExpenseManager(data_file)


@pytest.fixture
def sample_expenses():
    # Week of Monday 2026-10-12; "today" in these tests is Wednesday 2026-10-14
    return [
        Expense(Decimal("4.00"), "food", "last year", date(2025, 10, 14)),
        Expense(Decimal("30.00"), "utilities", "end of september", date(2026, 9, 30)),
        Expense(Decimal("7.25"), "travel", "bus, sunday", date(2026, 10, 11)),
        Expense(Decimal("12.50"), "food", "lunch", date(2026, 10, 12)),
        Expense(Decimal("3.10"), "food", "coffee", date(2026, 10, 14)),
        Expense(Decimal("20.00"), "other", "gift", date(2026, 10, 14)),
        Expense(Decimal("99.99"), "travel", "train booked ahead", date(2026, 10, 15)),
    ]


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed console answers in order. EOFError once they run out."""
    def _script(*answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr(builtins, "input", fake_input)
    return _script
