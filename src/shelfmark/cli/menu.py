# ABOUTME: Interactive menu session driving the catalog from standard input.
# ABOUTME: Reads a choice per iteration, runs the matching catalog operation, prints the outcome.

import logging
from collections.abc import Iterable

import click
from rich.console import Console

from shelfmark.catalog import BookNotFoundError, Catalog, DuplicateIsbnError
from shelfmark.cli.prompts import InvalidInputError, prompt_record, read_field
from shelfmark.records import Record

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 20

MENU_LINES = (
    "1. Add Book/EBook",
    "2. Remove Book/EBook",
    "3. Search Books",
    "4. List All Books/EBooks",
    "5. Exit",
)


class MenuSession:
    """Read-eval loop over the library menu.

    Owns no state beyond the catalog it is handed. Errors from a single
    command are printed and the loop carries on; end of input ends it.
    """

    def __init__(self, catalog: Catalog, *, console: Console | None = None) -> None:
        self._catalog = catalog
        self._console = console or Console()
        self._handlers = {
            "1": self._add,
            "2": self._remove,
            "3": self._search,
            "4": self._list,
        }

    def run(self) -> None:
        """Loop until the user picks Exit or input runs out."""
        while True:
            self._show_menu()
            try:
                choice = read_field("Enter your choice")
                if choice == "5":
                    self._say("Exiting...")
                    return

                handler = self._handlers.get(choice)
                if handler is None:
                    self._say("Invalid choice.")
                    continue
                handler()
            except click.Abort:
                logger.debug("Input closed, leaving menu loop")
                return

    def _show_menu(self) -> None:
        self._console.print()
        self._console.print("[bold]Library Management System[/bold]")
        for line in MENU_LINES:
            self._say(line)

    def _add(self) -> None:
        try:
            record = prompt_record()
            self._catalog.add(record)
        except InvalidInputError as exc:
            self._say(str(exc))
            return
        except DuplicateIsbnError as exc:
            self._say(f"Error: {exc}")
            return

        self._say(f"{record.kind} added successfully!")

    def _remove(self) -> None:
        isbn = read_field("Enter ISBN of the book to remove")
        try:
            self._catalog.remove(isbn)
        except BookNotFoundError as exc:
            self._say(f"Error: {exc}")
            return

        self._say("Book removed successfully!")

    def _search(self) -> None:
        title = read_field("Enter title to search")
        results = self._catalog.search_by_title(title)
        if not results:
            self._say("No books found.")
            return

        self._say("Search Results:")
        self._show_records(results)

    def _list(self) -> None:
        self._say("List of all Books/EBooks:")
        self._show_records(self._catalog.list_all())

    def _show_records(self, records: Iterable[Record]) -> None:
        for record in records:
            self._say(record.describe())
            self._say(SEPARATOR)

    def _say(self, text: str) -> None:
        # Record text is user input and is written verbatim, bypassing rich rendering.
        click.echo(text, file=self._console.file)
