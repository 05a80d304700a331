"""In-memory directory of books, people and loans."""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from src.models.book import Book
from src.models.loan import Loan
from src.models.person import Librarian, Patron
from src.models.results import LibrarySummary

logger = logging.getLogger(__name__)


class LibraryDirectory:
    """Owns every entity of one library, keyed by identifier.

    Lookups return the stored instances (or None); callers mutate them in
    place. Registration overwrites an existing entry with the same key.
    ``lock`` serializes the lending and return workflows for this
    directory.

    Args:
        name: Display name of the library.
        clock: Callable returning the current time. Defaults to
               ``datetime.now``.
    """

    def __init__(
        self,
        name: str = "Library",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.name = name
        self._clock = clock or datetime.now
        self._books: dict[str, Book] = {}
        self._patrons: dict[str, Patron] = {}
        self._librarians: dict[str, Librarian] = {}
        self._loans: dict[str, Loan] = {}
        self._history: list[Loan] = []
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    @property
    def lock(self) -> asyncio.Lock:
        """Workflow lock for the running event loop.

        An asyncio.Lock is bound to one loop, so a new one is created
        whenever the directory is used from a different loop.
        """
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def now(self) -> datetime:
        return self._clock()

    # --- registration -------------------------------------------------

    def add_book(self, book: Book) -> None:
        self._books[book.isbn] = book
        logger.debug("Book added: %s", book.title)

    def register_patron(self, patron: Patron) -> None:
        self._patrons[patron.id] = patron
        logger.debug("Patron registered: %s", patron.name)

    def register_librarian(self, librarian: Librarian) -> None:
        self._librarians[librarian.id] = librarian
        logger.debug("Librarian registered: %s", librarian.name)

    # --- lookup -------------------------------------------------------

    def find_book_by_id(self, isbn: str) -> Book | None:
        return self._books.get(isbn)

    def find_book_by_title(self, text: str) -> Book | None:
        """Return the first book whose title contains ``text``, ignoring case."""
        needle = text.lower()
        for book in self._books.values():
            if needle in book.title.lower():
                return book
        return None

    def find_patron_by_id(self, patron_id: str) -> Patron | None:
        return self._patrons.get(patron_id)

    def find_librarian_by_id(self, librarian_id: str) -> Librarian | None:
        return self._librarians.get(librarian_id)

    def books(self) -> list[Book]:
        return list(self._books.values())

    def patrons(self) -> list[Patron]:
        return list(self._patrons.values())

    def librarians(self) -> list[Librarian]:
        return list(self._librarians.values())

    # --- loans --------------------------------------------------------

    def active_loans(self) -> list[Loan]:
        return [loan for loan in self._loans.values() if loan.active]

    @property
    def history(self) -> tuple[Loan, ...]:
        return tuple(self._history)

    def record_loan(self, loan: Loan) -> None:
        self._loans[loan.id] = loan

    def find_active_loan(self, patron_id: str, isbn: str) -> Loan | None:
        """Return the first active loan for the (patron, book) pair."""
        for loan in self._loans.values():
            if loan.patron_id == patron_id and loan.book_isbn == isbn and loan.active:
                return loan
        return None

    def archive_loan(self, loan: Loan) -> None:
        """Move a completed loan from the active map to the history."""
        if loan.active:
            raise ValueError(f"Loan {loan.id} is still active")
        self._loans.pop(loan.id, None)
        self._history.append(loan)

    # --- reporting ----------------------------------------------------

    def report(self) -> LibrarySummary:
        return LibrarySummary(
            total_books=len(self._books),
            total_patrons=len(self._patrons),
            total_librarians=len(self._librarians),
            active_loans=len(self.active_loans()),
            completed_loans=len(self._history),
            available_copies=sum(b.available_copies for b in self._books.values()),
            lent_copies=sum(b.lent_copies for b in self._books.values()),
        )
