"""Data models for the library lending application."""

from src.models.book import Book
from src.models.loan import Loan
from src.models.person import Librarian, Patron, Person
from src.models.results import LibrarySummary, LoanOutcome, LoanResult

__all__ = [
    "Book",
    "Librarian",
    "LibrarySummary",
    "Loan",
    "LoanOutcome",
    "LoanResult",
    "Patron",
    "Person",
]
