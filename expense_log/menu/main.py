"""
Main menu and application entry point for the Expense Log.
"""
import sys
import logging
from typing import Optional

from expense_log.config import Config
from expense_log.storage.manager import ExpenseManager
from expense_log.menu.views import MenuView
from expense_log.menu.handlers import MenuHandlers
from expense_log.menu.exceptions import ExpenseLogError, UserInputError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_file: Optional[str] = None, level: str = "INFO") -> None:
    """Log to a file at ``level`` and to the console for warnings and above."""
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.WARNING)
    handlers = [stream_handler]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, handlers=handlers)


class ExpenseMenu:
    """Main menu for the Expense Log application."""

    def __init__(self, manager: ExpenseManager, view: Optional[MenuView] = None):
        self.manager = manager
        self.view = view or MenuView(currency=Config.CURRENCY)
        self.handlers = MenuHandlers(self.manager, self.view)

        self.main_menu = self.handlers.get_menu_options() + [
            {"text": "Exit", "handler": self._exit_app},
        ]

    def _exit_app(self) -> None:
        self.view.show_message("Goodbye!", "info")
        sys.exit(0)

    def run(self) -> None:
        """Run the main menu loop until Exit is chosen or input ends."""
        while True:
            try:
                choice = self.view.display_menu("Expense Log - Main Menu", self.main_menu)

                try:
                    choice_idx = int(choice) - 1
                except ValueError:
                    self.view.show_message("Please enter a valid number.", "error")
                    continue
                if not 0 <= choice_idx < len(self.main_menu):
                    self.view.show_message("Invalid choice. Please try again.", "error")
                    continue

                self.main_menu[choice_idx]["handler"]()

            except EOFError:
                logger.info("End of input, exiting")
                self._exit_app()
            except KeyboardInterrupt:
                self.view.show_message("\nOperation cancelled by user.", "warning")
            except UserInputError as e:
                self.view.show_message(str(e), "warning")
            except ExpenseLogError as e:
                self.view.show_message(f"Error: {e}", "error")
            except Exception as e:
                logger.exception("Unexpected error in menu:")
                self.view.show_message(f"An unexpected error occurred: {e}", "error")


def main():
    """Entry point for the Expense Log CLI."""
    try:
        Config.validate()
    except ValueError as e:
        print(f"\nConfiguration error: {e}")
        sys.exit(1)

    setup_logging(Config.LOG_FILE, Config.LOG_LEVEL)

    manager = ExpenseManager(Config.EXPENSE_FILE)
    try:
        manager.load()
        menu = ExpenseMenu(manager)
        if manager.last_error:
            menu.view.show_message(
                f"Could not read {manager.path}: {manager.last_error}", "error"
            )
        menu.run()
    except Exception as e:
        logger.exception("Fatal error in Expense Log:")
        print(f"\nA fatal error occurred: {e}")
        print("Please check the logs for more information.")
        sys.exit(1)


if __name__ == "__main__":
    main()
