"""Tests for the in-memory library directory."""

import asyncio

import pytest

from src.models import Book, Librarian, Loan, Patron
from src.storage.directory import LibraryDirectory


class TestRegistration:
    def test_add_and_find_book(self) -> None:
        directory = LibraryDirectory()
        book = Book(isbn="111", title="1984", publication_year=1949)
        directory.add_book(book)
        assert directory.find_book_by_id("111") is book
        assert directory.find_book_by_id("999") is None

    def test_duplicate_key_overwrites(self) -> None:
        directory = LibraryDirectory()
        directory.add_book(Book(isbn="111", title="Old", publication_year=1900))
        directory.add_book(Book(isbn="111", title="New", publication_year=2000))
        assert len(directory.books()) == 1
        assert directory.find_book_by_id("111").title == "New"

    def test_register_people(self) -> None:
        directory = LibraryDirectory()
        patron = Patron(id="U001", name="Giselle", registration_number="1")
        librarian = Librarian(id="B001", name="Ana", role="Assistant", secret="x")
        directory.register_patron(patron)
        directory.register_librarian(librarian)
        assert directory.find_patron_by_id("U001") is patron
        assert directory.find_librarian_by_id("B001") is librarian
        assert directory.find_patron_by_id("B001") is None
        assert directory.find_librarian_by_id("U001") is None


class TestFindByTitle:
    def test_case_insensitive_substring(self, directory: LibraryDirectory) -> None:
        book = directory.find_book_by_title("casmurro")
        assert book is not None
        assert book.isbn == "222"

    def test_first_match_in_insertion_order(self, directory: LibraryDirectory) -> None:
        # Three titles match; "Dom Casmurro" was added first
        book = directory.find_book_by_title("o")
        assert book is not None
        assert book.isbn == "222"

    def test_no_match(self, directory: LibraryDirectory) -> None:
        assert directory.find_book_by_title("Ulysses") is None


class TestLoans:
    def test_active_loans_and_archive(self, directory: LibraryDirectory) -> None:
        loan = Loan(patron_id="U001", book_isbn="111", librarian_id="B001")
        directory.record_loan(loan)
        assert directory.active_loans() == [loan]
        assert directory.find_active_loan("U001", "111") is loan
        assert directory.find_active_loan("U002", "111") is None

        asyncio.run(loan.complete(clock=directory.now))
        directory.archive_loan(loan)

        assert directory.active_loans() == []
        assert directory.history == (loan,)
        assert directory.find_active_loan("U001", "111") is None

    def test_archive_active_loan_raises(self, directory: LibraryDirectory) -> None:
        loan = Loan(patron_id="U001", book_isbn="111", librarian_id="B001")
        directory.record_loan(loan)
        with pytest.raises(ValueError, match="still active"):
            directory.archive_loan(loan)

    def test_history_is_read_only_view(self, directory: LibraryDirectory) -> None:
        assert isinstance(directory.history, tuple)


class TestReport:
    def test_report_counts(self, directory: LibraryDirectory) -> None:
        directory.find_book_by_id("111").lent_copies = 2
        summary = directory.report()
        assert summary.total_books == 4
        assert summary.total_patrons == 4
        assert summary.total_librarians == 1
        assert summary.active_loans == 0
        assert summary.completed_loans == 0
        assert summary.lent_copies == 2
        assert summary.available_copies == 3 + 1 + 2 + 5 - 2

    def test_report_does_not_mutate(self, directory: LibraryDirectory) -> None:
        before = [b.model_dump() for b in directory.books()]
        directory.report()
        assert [b.model_dump() for b in directory.books()] == before

    def test_empty_directory(self) -> None:
        summary = LibraryDirectory().report()
        assert summary.total_books == 0
        assert summary.available_copies == 0
