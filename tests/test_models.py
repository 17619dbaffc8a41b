from datetime import date
from decimal import Decimal
import dataclasses

import pytest

from expense_log.storage.models import Category, Expense, normalize_category
from expense_log.utils import parse_amount, parse_date, safe_decimal, week_start, month_bounds


def test_expense_defaults_to_today():
    expense = Expense(Decimal("1.00"))
    assert expense.date == date.today()
    assert expense.category == "other"
    assert expense.description == ""


def test_expense_normalizes_fields():
    expense = Expense("12.50", "  Food ", " lunch\nwith team ", "2026-10-01")
    assert expense.amount == Decimal("12.50")
    assert expense.category == "food"
    assert expense.description == "lunch with team"
    assert expense.date == date(2026, 10, 1)


def test_free_text_category_is_kept():
    expense = Expense(Decimal("5"), "Books  and Games")
    assert expense.category == "books and games"


@pytest.mark.parametrize("amount", ["0", "-1", "abc", "", None, "NaN"])
def test_expense_rejects_invalid_amount(amount):
    with pytest.raises(ValueError):
        Expense(amount)


def test_expense_is_immutable():
    expense = Expense(Decimal("2.00"), "food")
    with pytest.raises(dataclasses.FrozenInstanceError):
        expense.amount = Decimal("3.00")


def test_expenses_compare_by_value():
    a = Expense(Decimal("2.00"), "food", "tea", date(2026, 1, 1))
    b = Expense(Decimal("2.00"), "FOOD", "tea", date(2026, 1, 1))
    assert a == b


def test_normalize_category():
    assert normalize_category(Category.TRAVEL) == "travel"
    assert normalize_category("") == "other"
    assert normalize_category(None) == "other"
    assert normalize_category(" Utilities ") == "utilities"


def test_safe_decimal_and_parse_amount():
    assert safe_decimal("oops") == Decimal("0.00")
    assert safe_decimal(2) == Decimal("2")
    assert safe_decimal(" 3.5 ") == Decimal("3.5")
    assert parse_amount("0.01") == Decimal("0.01")


def test_parse_date():
    assert parse_date("2026-02-28") == date(2026, 2, 28)
    with pytest.raises(ValueError):
        parse_date("28/02/2026")


def test_week_start_and_month_bounds():
    assert week_start(date(2026, 10, 17)) == date(2026, 10, 12)
    assert week_start(date(2026, 10, 12)) == date(2026, 10, 12)
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))


def test_date_field_is_typed_as_date():
    types = {f.name: f.type for f in dataclasses.fields(Expense)}
    assert types["date"] is date
    assert Expense.__annotations__["date"] is date
