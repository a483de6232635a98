"""Interactive console menu over a user registry."""

import logging

import typer

from common.models.user import UserRecord
from common.services.user_registry import UserRegistry

logger = logging.getLogger(__name__)

MENU = """
Menu:
1. Add User
2. View All Users
3. Search User
4. Exit"""

ADD_USER = 1
LIST_USERS = 2
SEARCH_USER = 3
EXIT = 4


def format_user(record: UserRecord) -> str:
    """Render a record as a single console line."""
    return f"User{{name='{record.name}', age={record.age}, email='{record.email}'}}"


class UserShell:
    """Menu loop that owns all console I/O for a registry.

    Input parsing and user-facing messages live here; the registry only ever
    sees fully parsed records.
    """

    def __init__(self, registry: UserRegistry) -> None:
        self.registry = registry
        self._handlers = {
            ADD_USER: self.add_user,
            LIST_USERS: self.list_users,
            SEARCH_USER: self.search_user,
        }

    def run(self) -> int:
        """Run the menu until the user exits or input ends.

        Returns:
            Number of users held by the registry when the loop ends
        """
        try:
            while True:
                typer.echo(MENU)
                choice = self._read_choice()
                if choice == EXIT:
                    break
                handler = self._handlers.get(choice)
                if handler is None:
                    typer.secho("Invalid choice, please try again!", fg=typer.colors.YELLOW)
                    continue
                handler()
        except typer.Abort:
            logger.debug("Input closed, leaving the menu")
            typer.echo()

        typer.echo("Exiting program. Goodbye!")
        return len(self.registry)

    def _read_choice(self) -> int:
        while True:
            raw = typer.prompt("Enter your choice")
            try:
                return int(raw)
            except ValueError:
                typer.secho("Please enter a valid number!", fg=typer.colors.RED)

    def _read_age(self) -> int:
        while True:
            raw = typer.prompt("Enter age")
            try:
                return int(raw)
            except ValueError:
                typer.secho("Age must be a whole number.", fg=typer.colors.RED)

    def add_user(self) -> None:
        name = typer.prompt("Enter name", default="", show_default=False)
        age = self._read_age()
        email = typer.prompt("Enter email", default="", show_default=False)
        if self.registry.add(UserRecord(name=name, age=age, email=email)):
            typer.secho("User added successfully!", fg=typer.colors.GREEN)

    def list_users(self) -> None:
        records = self.registry.list_all()
        if not records:
            typer.secho("No users found.", fg=typer.colors.YELLOW)
            return
        typer.echo("\nList of users:")
        for record in records:
            typer.echo(format_user(record))

    def search_user(self) -> None:
        query = typer.prompt("Enter name to search", default="", show_default=False)
        matches = self.registry.search_by_name(query)
        if not matches:
            typer.secho(f"No user found with name: {query}", fg=typer.colors.YELLOW)
            return
        for record in matches:
            typer.echo(f"Found: {format_user(record)}")
