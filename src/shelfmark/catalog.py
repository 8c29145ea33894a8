# ABOUTME: In-memory catalog operations for Shelfmark.
# ABOUTME: Add, remove, search by title, and list book records in insertion order.

import logging
from collections.abc import Iterator

from shelfmark.records import Record

logger = logging.getLogger(__name__)


class DuplicateIsbnError(Exception):
    """Raised when adding a record whose isbn is already in the catalog."""


class BookNotFoundError(Exception):
    """Raised when removing an isbn that is not in the catalog."""


class Catalog:
    """Ordered collection of book records keyed by isbn.

    Lookups are linear scans over the list; insertion order is kept for
    listing and search results.
    """

    def __init__(self) -> None:
        self._records: list[Record] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))

    def __contains__(self, isbn: object) -> bool:
        return any(record.isbn == isbn for record in self._records)

    def add(self, record: Record) -> None:
        """Append a record to the catalog.

        Raises:
            DuplicateIsbnError: If any record, of either kind, already has this isbn.
        """
        if record.isbn in self:
            logger.info("Rejected duplicate isbn %s", record.isbn)
            raise DuplicateIsbnError("ISBN already exists")

        self._records.append(record)
        logger.debug("Added %s %s (%d in catalog)", record.kind, record.isbn, len(self))

    def remove(self, isbn: str) -> None:
        """Remove the first record with the given isbn.

        Raises:
            BookNotFoundError: If no record has this isbn.
        """
        for index, record in enumerate(self._records):
            if record.isbn == isbn:
                del self._records[index]
                logger.debug("Removed %s %s (%d in catalog)", record.kind, isbn, len(self))
                return

        logger.info("Nothing to remove for isbn %s", isbn)
        raise BookNotFoundError(f"Book with ISBN {isbn} not found")

    def get_by_isbn(self, isbn: str) -> Record | None:
        """Retrieve a record by its isbn."""
        for record in self._records:
            if record.isbn == isbn:
                return record
        return None

    def search_by_title(self, substring: str) -> list[Record]:
        """Return records whose title contains the substring, in catalog order.

        Matching is case-sensitive; an empty substring matches every record.
        """
        return [record for record in self._records if substring in record.title]

    def list_all(self) -> list[Record]:
        """Return all records in insertion order."""
        return list(self._records)
