"""Human-readable listings of a library directory."""

from collections.abc import Callable, Iterable
from datetime import datetime

from src.models.results import LoanResult
from src.storage.directory import LibraryDirectory


class ConsoleReporter:
    """Renders directory contents and workflow outcomes as text.

    Only reads from the directory; nothing here mutates state. Each
    ``render_*`` method returns a string and :meth:`show` writes it to
    the configured sink.

    Args:
        directory: The library directory to report on.
        write: Output sink for :meth:`show`. Defaults to ``print``.
    """

    def __init__(
        self,
        directory: LibraryDirectory,
        write: Callable[[str], object] | None = None,
    ) -> None:
        self._directory = directory
        self._write = write or print

    def show(self, text: str) -> None:
        self._write(text)

    def render_catalog(self) -> str:
        return _section(
            f'CATALOG OF "{self._directory.name}"',
            50,
            (book.describe() for book in self._directory.books()),
            "No books registered.",
        )

    def render_patrons(self) -> str:
        return _section(
            "REGISTERED PATRONS",
            30,
            (patron.describe() for patron in self._directory.patrons()),
            "No patrons registered.",
        )

    def render_librarians(self) -> str:
        return _section(
            "REGISTERED LIBRARIANS",
            35,
            (librarian.describe() for librarian in self._directory.librarians()),
            "No librarians registered.",
        )

    def render_active_loans(self, now: datetime | None = None) -> str:
        current = now or self._directory.now()
        return _section(
            "ACTIVE LOANS",
            30,
            (loan.describe(current) for loan in self._directory.active_loans()),
            "No active loans.",
        )

    def render_summary(self) -> str:
        summary = self._directory.report()
        lines = [
            f"Total books: {summary.total_books}",
            f"Total patrons: {summary.total_patrons}",
            f"Total librarians: {summary.total_librarians}",
            f"Active loans: {summary.active_loans}",
            f"Loan history: {summary.completed_loans}",
            f"Copies available: {summary.available_copies}",
            f"Copies lent: {summary.lent_copies}",
        ]
        return _section("LIBRARY REPORT", 40, lines, "")

    def render_result(self, result: LoanResult) -> str:
        """Describe a lending or return outcome."""
        if not result.success:
            return f"   {result.message}"

        directory = self._directory
        patron = directory.find_patron_by_id(result.patron_id)
        book = directory.find_book_by_id(result.book_isbn)
        lines = [
            f"   {result.message}!",
            f"   Patron: {patron.name if patron else result.patron_id}",
            f"   Book: {book.title if book else result.book_isbn}",
        ]
        if result.loan is not None:
            if result.loan.active:
                lines.append(f"   Loan ID: {result.loan.id}")
            else:
                lines.append(f"   Overdue: {result.loan.overdue_days()} days")
        return "\n".join(lines)


def _section(title: str, width: int, rows: Iterable[str], empty: str) -> str:
    lines = [f"\n {title}", "=" * width]
    body = list(rows)
    lines.extend(body if body else [empty])
    return "\n".join(lines)
