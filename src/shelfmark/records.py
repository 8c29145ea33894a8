# ABOUTME: Record model for the Shelfmark catalog: physical and electronic books.
# ABOUTME: Both variants are immutable and render their own detail view via describe().

from dataclasses import dataclass


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class PhysicalBook:
    """A printed book held by the library.

    The isbn is the catalog's identity key. Records are built fully formed
    and never mutated afterwards; to change one, remove it and add a new one.
    """

    title: str
    author: str
    isbn: str
    available: bool = True

    @property
    def kind(self) -> str:
        return "Book"

    def describe(self) -> str:
        """Multi-line detail view of the book."""
        return "\n".join(
            [
                f"Title: {self.title}",
                f"Author: {self.author}",
                f"ISBN: {self.isbn}",
                f"Available: {_format_bool(self.available)}",
            ]
        )


@dataclass(frozen=True)
class ElectronicBook:
    """A digital copy: the physical book fields plus a file size in megabytes."""

    title: str
    author: str
    isbn: str
    file_size_mb: int
    available: bool = True

    @property
    def kind(self) -> str:
        return "EBook"

    def describe(self) -> str:
        """Multi-line detail view, with the file size after the shared fields."""
        return "\n".join(
            [
                f"Title: {self.title}",
                f"Author: {self.author}",
                f"ISBN: {self.isbn}",
                f"Available: {_format_bool(self.available)}",
                f"File Size: {self.file_size_mb} MB",
            ]
        )


Record = PhysicalBook | ElectronicBook
