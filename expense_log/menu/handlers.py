import logging
from datetime import date, datetime

from expense_log.menu.exceptions import StorageError
from expense_log.menu.views import MenuView
from expense_log.storage.manager import ExpenseManager
from expense_log.storage.models import Category, Expense
from expense_log.utils import DATE_FORMAT, month_bounds, parse_amount

logger = logging.getLogger(__name__)


class MenuHandlers:
    def __init__(self, manager: ExpenseManager, view: MenuView):
        self.manager = manager
        self.view = view

    def handle_add_expense(self) -> None:
        # 1. Amount
        while True:
            amount_str = self.view.get_input("1. Amount (e.g., 12.50): ")
            try:
                amount = parse_amount(amount_str)
                break
            except ValueError:
                self.view.show_message("Invalid amount. Please enter a number greater than 0.", "error")

        # 2. Category
        self.view.show_categories(c.value for c in Category)
        category = self.view.get_input("2. Category (leave empty for 'other'): ", required=False)

        # 3. Description
        description = self.view.get_input("3. Description: ", required=False)

        # 4. Date
        while True:
            date_str = self.view.get_input("4. Date (YYYY-MM-DD, leave empty for today): ", required=False)
            if not date_str:
                expense_date = date.today()
                break
            try:
                expense_date = datetime.strptime(date_str, DATE_FORMAT).date()
                break
            except ValueError:
                self.view.show_message("Invalid date format. Please use YYYY-MM-DD.", "error")

        expense = Expense(amount=amount, category=category or "", description=description or "", date=expense_date)
        if not self.manager.add(expense):
            logger.warning("Expense kept in memory only, save failed")
            raise StorageError(
                f"Expense recorded for this session but could not be saved: {self.manager.last_error}"
            )
        self.view.show_message(
            f"Added {self.view.money(expense.amount)} ({expense.category}) on {expense.date.isoformat()}.",
            "success",
        )

    def handle_view_summary(self) -> None:
        today = date.today()
        totals = self.manager.summary(today)
        by_category = self.manager.totals_by_category(*month_bounds(today))
        self.view.show_summary(totals, by_category)

    def handle_view_all(self) -> None:
        self.view.show_expenses(list(self.manager))

    def get_menu_options(self):
        options = [
            {"text": "Add expense", "handler": self.handle_add_expense},
            {"text": "View summary", "handler": self.handle_view_summary},
            {"text": "View all expenses", "handler": self.handle_view_all},
        ]
        return options
