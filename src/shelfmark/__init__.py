# ABOUTME: Shelfmark, an interactive in-memory library catalog.
# ABOUTME: Exports the record variants and the Catalog with its errors.

from shelfmark.catalog import BookNotFoundError, Catalog, DuplicateIsbnError
from shelfmark.records import ElectronicBook, PhysicalBook, Record

__all__ = [
    "BookNotFoundError",
    "Catalog",
    "DuplicateIsbnError",
    "ElectronicBook",
    "PhysicalBook",
    "Record",
]
