# ABOUTME: Unit tests for the PhysicalBook and ElectronicBook record variants.
# ABOUTME: Covers defaults, immutability, kind labels, and the describe() layout.

import dataclasses

import pytest

from shelfmark.records import ElectronicBook, PhysicalBook


class TestPhysicalBook:
    """Tests for PhysicalBook."""

    def test_available_defaults_to_true(self) -> None:
        """A new physical book is available."""
        book = PhysicalBook(title="Dune", author="Herbert", isbn="111")
        assert book.available is True

    def test_describe_layout(self) -> None:
        """describe() renders the four shared fields, one per line."""
        book = PhysicalBook(title="Dune", author="Herbert", isbn="111")
        assert book.describe() == (
            "Title: Dune\nAuthor: Herbert\nISBN: 111\nAvailable: true"
        )

    def test_describe_unavailable(self) -> None:
        """Unavailable books render a lowercase false."""
        book = PhysicalBook(title="Dune", author="Herbert", isbn="111", available=False)
        assert book.describe().endswith("Available: false")

    def test_is_immutable(self) -> None:
        """Fields cannot be reassigned after construction."""
        book = PhysicalBook(title="Dune", author="Herbert", isbn="111")
        with pytest.raises(dataclasses.FrozenInstanceError):
            book.title = "Other"  # type: ignore[misc]

    def test_kind(self) -> None:
        assert PhysicalBook(title="Dune", author="Herbert", isbn="111").kind == "Book"


class TestElectronicBook:
    """Tests for ElectronicBook."""

    def test_describe_appends_file_size(self) -> None:
        """The file size line follows the shared fields."""
        ebook = ElectronicBook(
            title="Dune Messiah", author="Herbert", isbn="222", file_size_mb=5
        )
        assert ebook.describe() == (
            "Title: Dune Messiah\n"
            "Author: Herbert\n"
            "ISBN: 222\n"
            "Available: true\n"
            "File Size: 5 MB"
        )

    def test_positional_file_size(self) -> None:
        """File size is the fourth positional field."""
        ebook = ElectronicBook("Dune Messiah", "Herbert", "222", 5)
        assert ebook.file_size_mb == 5
        assert ebook.available is True

    def test_kind(self) -> None:
        ebook = ElectronicBook("Dune Messiah", "Herbert", "222", 5)
        assert ebook.kind == "EBook"

    def test_not_equal_to_physical_with_same_fields(self) -> None:
        """Variants are distinct types even when the shared fields match."""
        book = PhysicalBook(title="Dune", author="Herbert", isbn="111")
        ebook = ElectronicBook(title="Dune", author="Herbert", isbn="111", file_size_mb=1)
        assert book != ebook
