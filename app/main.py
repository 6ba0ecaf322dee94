"""
Console Frontend for InvestWise

This is the menu-driven interface the user interacts with.

DESIGN PRINCIPLES:
1. Numbered menus, one choice per prompt
2. Bad input is reported and the menu is shown again
3. Storage failures stop the session instead of risking more damage
4. Components are built once and passed in, never looked up globally

Menus:
    Main:      1. Sign Up  2. Login  3. Exit
    Dashboard: 1. Display Portfolio  2. Add Asset  3. Remove Asset
               4. Edit Asset  5. Calculate Zakat  6. Export Report  7. Logout
"""

import sys
from decimal import Decimal, InvalidOperation
from typing import Optional, TextIO

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from investwise.config import configure_logging, get_settings, validate_all_settings
from investwise.errors import AccountError, InvalidSelectionError, StorageError
from investwise.models.records import User
from investwise.orchestrator import AppComponents, create_app_components
from investwise.portfolio.report import money


MAIN_MENU = ("Sign Up", "Login", "Exit")
DASHBOARD_MENU = (
    "Display Portfolio",
    "Add Asset",
    "Remove Asset",
    "Edit Asset",
    "Calculate Zakat",
    "Export Report",
    "Logout",
)


def describe_validation_error(error: ValidationError) -> str:
    """First validation message, without pydantic's URL noise."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {first['msg']}" if field else first["msg"]


class ConsoleApp:
    """
    Interactive session.

    Pass `stream` to read answers from a file-like object instead of
    the terminal (used by tests).
    """

    def __init__(
        self,
        components: AppComponents,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        self.components = components
        self.console = console or Console()
        self._stream = stream

    # ------------------------------------------------------------------
    # Input helpers
    # ------------------------------------------------------------------

    def _ask(self, prompt: str, password: bool = False) -> str:
        if self._stream is None:
            return self.console.input(prompt, password=password).strip()

        self.console.print(prompt, end="")
        line = self._stream.readline()
        if line == "":
            raise EOFError
        return line.strip()

    def _ask_required(self, prompt: str, field: str, password: bool = False) -> str:
        while True:
            value = self._ask(prompt, password=password)
            if value:
                return value
            self.console.print(f"{field} cannot be empty.")

    def _ask_choice(self, prompt: str = "Choose option: ") -> Optional[int]:
        """Read a number; None if the answer is not one."""
        answer = self._ask(prompt)
        try:
            return int(answer)
        except ValueError:
            return None

    def _menu(self, title: str, options: tuple[str, ...]) -> Optional[int]:
        self.console.print(f"\n[bold]=== {title} ===[/bold]")
        for number, label in enumerate(options, start=1):
            self.console.print(f"{number}. {label}")
        return self._ask_choice()

    def _print_numbered(self, assets) -> None:
        for number, asset in enumerate(assets, start=1):
            self.console.print(f"{number}. {asset}", markup=False)

    # ------------------------------------------------------------------
    # Main menu
    # ------------------------------------------------------------------

    def run(self) -> int:
        """
        Run the main menu until the user exits.

        Returns:
            Process exit status (1 after a storage failure)
        """
        while True:
            try:
                choice = self._menu("Welcome to InvestWise", MAIN_MENU)
                if choice == 1:
                    self.sign_up()
                elif choice == 2:
                    self.login()
                elif choice == 3:
                    return 0
                else:
                    self.console.print("Invalid option.")
            except (AccountError, InvalidSelectionError) as e:
                self.console.print(f"[red]Error:[/red] {e}")
            except ValidationError as e:
                self.console.print(f"[red]Error:[/red] {describe_validation_error(e)}")
            except StorageError as e:
                self.components.audit_logger.log_storage_error(str(e), "session")
                self.console.print(f"[red]Storage failure:[/red] {e}")
                self.console.print("Stopping to protect your data.")
                return 1
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                return 0
            except Exception as e:
                self.components.audit_logger.log_error(type(e).__name__, str(e))
                raise

    def sign_up(self) -> None:
        name = self._ask_required("Enter name: ", "Name")
        email = self._ask_required("Enter email: ", "Email")
        password = self._ask_required("Enter password: ", "Password", password=True)

        user = self.components.accounts.create_account(name, email, password)
        self.console.print(f"Sign-up successful! Your ID: {user.id}")
        self.login()

    def login(self) -> None:
        self.console.print("=== Login ===")
        email = self._ask_required("Enter email: ", "Email")
        password = self._ask_required("Enter password: ", "Password", password=True)

        user = self.components.accounts.authenticate(email, password)
        self.console.print(f"Welcome, {user.name}", markup=False)
        self.console.print(f"Your ID: {user.id}")
        self.dashboard(user)

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def dashboard(self, user: User) -> None:
        actions = {
            1: self.display_portfolio,
            2: self.add_asset,
            3: self.remove_asset,
            4: self.edit_asset,
            5: self.calculate_zakat,
            6: self.export_report,
        }

        while True:
            choice = self._menu("Dashboard", DASHBOARD_MENU)
            if choice == 7:
                self.components.audit_logger.log_logout(user.id)
                return

            action = actions.get(choice)
            if action is None:
                self.console.print("Invalid option.")
                continue

            try:
                action(user)
            except InvalidSelectionError as e:
                self.console.print(str(e))
            except ValidationError as e:
                self.console.print(f"[red]Error:[/red] {describe_validation_error(e)}")

    def display_portfolio(self, user: User) -> None:
        assets = self.components.portfolio.list_assets(user)
        self.console.print(f"\n=== Portfolio for {user.name} ===", markup=False)
        if not assets:
            self.console.print("No assets found.")
            return

        table = Table(show_header=True)
        table.add_column("#", justify="right")
        table.add_column("Category")
        table.add_column("Name")
        table.add_column("Value", justify="right")
        for number, asset in enumerate(assets, start=1):
            table.add_row(str(number), asset.category, asset.name, money(asset.value))
        self.console.print(table)

    def add_asset(self, user: User) -> None:
        portfolio = self.components.portfolio
        self.console.print("\nChoose asset to add:")
        self._print_numbered(portfolio.catalog(user))

        choice = self._ask_choice("Choose asset: ")
        try:
            portfolio.add_from_catalog(user, choice if choice is not None else 0)
            self.console.print("Asset added.")
        except InvalidSelectionError as e:
            self.console.print(str(e))
        self.display_portfolio(user)

    def remove_asset(self, user: User) -> None:
        portfolio = self.components.portfolio
        assets = portfolio.list_assets(user)
        if not assets:
            self.console.print("No assets to remove.")
            return

        self.console.print("\nSelect asset to remove:")
        self._print_numbered(assets)
        choice = self._ask_choice("Enter number to remove: ")
        portfolio.remove_asset(user, choice if choice is not None else 0)
        self.console.print("Asset removed.")

    def edit_asset(self, user: User) -> None:
        portfolio = self.components.portfolio
        assets = portfolio.list_assets(user)
        if not assets:
            self.console.print("No assets to edit.")
            return

        self.console.print("\nSelect asset to edit value:")
        self._print_numbered(assets)
        choice = self._ask_choice("Enter number to edit: ")
        if choice is None or not 1 <= choice <= len(assets):
            raise InvalidSelectionError("Invalid selection.")

        answer = self._ask(f"Enter new value for {assets[choice - 1].name}: ")
        try:
            new_value = Decimal(answer.replace(",", ""))
        except InvalidOperation:
            self.console.print(f"Invalid value: {answer!r}")
            return

        portfolio.edit_asset_value(user, choice, new_value)
        self.console.print("Asset value updated.")

    def calculate_zakat(self, user: User) -> None:
        summary = self.components.portfolio.calculate_zakat(user)
        self.console.print(f"\n=== Zakat for {user.name} ===", markup=False)
        if not summary.lines:
            self.console.print("No assets found.")
            return

        table = Table(show_header=True)
        table.add_column("Asset")
        table.add_column("Value", justify="right")
        table.add_column("Zakat", justify="right")
        for line in summary.lines:
            table.add_row(line.asset.name, money(line.asset.value), money(line.levy))
        table.add_row("Total", money(summary.total_value), money(summary.total_levy))
        self.console.print(table)

    def export_report(self, user: User) -> None:
        result = self.components.reports.export(user)
        for line in result.lines:
            self.console.print(line, markup=False)
        self.console.print(f"Report saved to {result.path}")


def check_settings(console: Console) -> bool:
    """
    Report every settings group that fails to load.

    Returns:
        True when all groups are valid
    """
    status = validate_all_settings()
    failed = [name for name, ok in status.items() if ok is False]
    for name in failed:
        error = status[f"{name}_error"]
        console.print(f"Configuration error ({name}): {error}", style="red", markup=False)
    return not failed


def main() -> None:
    """Console entry point."""
    if not check_settings(Console(stderr=True)):
        sys.exit(2)

    settings = get_settings()
    configure_logging(settings.app.effective_log_level, settings.app.log_file)

    components = create_app_components(settings)
    sys.exit(ConsoleApp(components).run())


if __name__ == "__main__":
    main()
