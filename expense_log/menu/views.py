"""
Menu display and user interaction components for the Expense Log.
"""
from typing import List, Dict, Any, Optional, Iterable
from decimal import Decimal

from tabulate import tabulate

from expense_log.menu.exceptions import OperationCancelled
from expense_log.storage.models import Expense

# Add colorama for colored terminal output
from colorama import init, Fore, Style
init(autoreset=True)

CANCEL_KEYS = ('q',)


class MenuView:
    """Handles all menu display and user interaction."""

    def __init__(self, currency: str = "$"):
        self.currency = currency

    def money(self, amount: Decimal) -> str:
        return f"{self.currency}{amount:.2f}"

    @staticmethod
    def print_header(text: str, width: int = 60) -> None:
        """Print a formatted header."""
        print("\n" + "=" * width)
        print(f"{text.upper():^{width}}")
        print("=" * width + "\n")

    @staticmethod
    def print_section(text: str, width: int = 60) -> None:
        print("\n" + "-" * width)
        print(f"{text.upper():^{width}}")
        print("-" * width)

    def display_menu(self, title: str, options: List[Dict[str, Any]]) -> str:
        """Display a numbered menu and get the raw user selection."""
        self.print_header(title)
        for i, option in enumerate(options, 1):
            print(Fore.WHITE + Style.BRIGHT + f"{i}. {option['text']}")
        return input(Fore.YELLOW + "\nEnter your choice: " + Style.RESET_ALL).strip()

    def get_input(self, prompt: str, required: bool = True) -> Optional[str]:
        """Read one answer. 'q' cancels the current operation; empty returns None unless required."""
        while True:
            value = input(Fore.YELLOW + prompt + Style.RESET_ALL).strip()
            if value.lower() in CANCEL_KEYS:
                raise OperationCancelled("Operation cancelled.")
            if value:
                return value
            if not required:
                return None
            print(Fore.RED + "This field is required." + Style.RESET_ALL)

    def show_message(self, message: str, message_type: str = "info") -> None:
        """Green for success, red for errors, yellow for warnings, cyan for info."""
        if message_type == "error":
            print(Fore.RED + f"\n[ERROR] {message}" + Style.RESET_ALL)
        elif message_type == "success":
            print(Fore.GREEN + f"\n[SUCCESS] {message}" + Style.RESET_ALL)
        elif message_type == "warning":
            print(Fore.YELLOW + f"\n[WARNING] {message}" + Style.RESET_ALL)
        else:
            print(Fore.CYAN + f"\n{message}" + Style.RESET_ALL)

    def show_categories(self, categories: Iterable[str]) -> None:
        print("Suggested categories: " + ", ".join(categories))

    def show_summary(self, totals: Dict[str, Decimal], by_category: Dict[str, Decimal]) -> None:
        """Display the day/week/month totals and this month's category split."""
        self.print_section("Expense Summary")
        rows = [
            ["Today", self.money(totals["day"])],
            ["This week", self.money(totals["week"])],
            ["This month", self.money(totals["month"])],
        ]
        print(tabulate(rows, headers=["Period", "Total"], colalign=("left", "right")))

        if by_category:
            month_total = totals["month"]
            self.print_section("This month by category")
            rows = []
            for category, amount in by_category.items():
                share = (amount / month_total * 100) if month_total > 0 else Decimal("0")
                rows.append([category, self.money(amount), f"{share:.1f}%"])
            print(tabulate(rows, headers=["Category", "Total", "Share"], colalign=("left", "right", "right")))

    def show_expenses(self, expenses: List[Expense]) -> None:
        """Display all expenses in stored order followed by the overall total."""
        if not expenses:
            self.show_message("No expenses recorded yet.", "info")
            return
        self.print_section("All Expenses")
        rows = [
            [i, e.date.isoformat(), e.category, self.money(e.amount), e.description]
            for i, e in enumerate(expenses, 1)
        ]
        print(tabulate(rows, headers=["#", "Date", "Category", "Amount", "Description"],
                       colalign=("right", "left", "left", "right", "left")))
        total = sum((e.amount for e in expenses), Decimal("0"))
        print(f"\n{'Total:':<20} {self.money(total)}")
