# ABOUTME: Field collection for the interactive menu.
# ABOUTME: Reads book fields via click prompts and parses them into records.

import re

import click

from shelfmark.records import ElectronicBook, PhysicalBook, Record

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


class InvalidInputError(Exception):
    """Raised when a prompted value cannot be turned into a record field."""


def read_field(text: str) -> str:
    """Prompt for one line and return it stripped. Empty input is allowed."""
    value: str = click.prompt(text, default="", show_default=False)
    return value.strip()


def parse_file_size(value: str) -> int:
    """Parse a file size in megabytes.

    Only plain ASCII decimal digits with an optional sign are accepted.

    Raises:
        InvalidInputError: If the value is not an integer.
    """
    if not _DECIMAL_RE.fullmatch(value):
        raise InvalidInputError("Invalid file size input.")
    return int(value)


def prompt_record() -> Record:
    """Prompt for a book type and its fields, and build the record.

    Title, author, and isbn are always read before the type selector is
    checked, so a bad selector still consumes those three lines.

    Raises:
        InvalidInputError: If the type is not B or E, or the file size is not an integer.
    """
    book_type = read_field("Enter Book/EBook type (B/E)")
    title = read_field("Enter Title")
    author = read_field("Enter Author")
    isbn = read_field("Enter ISBN")

    if book_type == "B":
        return PhysicalBook(title=title, author=author, isbn=isbn)
    if book_type == "E":
        file_size = parse_file_size(read_field("Enter File Size (MB)"))
        return ElectronicBook(title=title, author=author, isbn=isbn, file_size_mb=file_size)

    raise InvalidInputError("Invalid book type.")
