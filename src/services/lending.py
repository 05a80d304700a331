"""Lending workflow: turns a loan request into a recorded Loan."""

import asyncio
import logging

from src.config import LatencyConfig, LendingConfig
from src.models.loan import Loan
from src.models.results import LoanOutcome, LoanResult
from src.storage.directory import LibraryDirectory

logger = logging.getLogger(__name__)


class LendingService:
    """Validates and executes loan requests against a directory.

    Checks run in a fixed order and stop at the first failure:
    patron, book and librarian must exist, the patron must be under the
    loan limit, and the book must have a copy on the shelf. No entity is
    mutated unless every check passes and the copy is actually lent.

    Args:
        directory: The library directory to operate on.
        lending: Loan limit and default loan duration.
        latency: Simulated delays for each suspension point.
    """

    def __init__(
        self,
        directory: LibraryDirectory,
        lending: LendingConfig | None = None,
        latency: LatencyConfig | None = None,
    ) -> None:
        self._directory = directory
        self._lending = lending or LendingConfig()
        self._latency = latency or LatencyConfig()

    async def request_loan(
        self, patron_id: str, isbn: str, librarian_id: str
    ) -> LoanResult:
        """Lend one copy of a book to a patron.

        Args:
            patron_id: Identifier of the borrowing patron.
            isbn: Catalog code of the requested book.
            librarian_id: Identifier of the authorizing librarian.

        Returns:
            A LoanResult; on success it carries the new Loan.
        """
        async with self._directory.lock:
            await asyncio.sleep(self._latency.loan_request)
            return await self._lend(patron_id, isbn, librarian_id)

    async def _lend(self, patron_id: str, isbn: str, librarian_id: str) -> LoanResult:
        directory = self._directory
        patron = directory.find_patron_by_id(patron_id)
        book = directory.find_book_by_id(isbn)
        librarian = directory.find_librarian_by_id(librarian_id)

        if patron is None:
            return self._reject(LoanOutcome.PATRON_NOT_FOUND, patron_id, isbn)
        if book is None:
            return self._reject(LoanOutcome.BOOK_NOT_FOUND, patron_id, isbn)
        if librarian is None:
            return self._reject(LoanOutcome.LIBRARIAN_NOT_FOUND, patron_id, isbn)
        if patron.held_count >= self._lending.loan_limit:
            return self._reject(LoanOutcome.LOAN_LIMIT_REACHED, patron_id, isbn)
        if not book.available:
            return self._reject(LoanOutcome.BOOK_UNAVAILABLE, patron_id, isbn)

        if not await book.borrow_one_copy(self._latency.copy_transfer):
            return self._reject(LoanOutcome.BORROW_FAILED, patron_id, isbn)

        patron.add_held_book(isbn)
        loan = Loan(
            patron_id=patron_id,
            book_isbn=isbn,
            librarian_id=librarian_id,
            started_at=directory.now(),
            duration_days=self._lending.loan_duration_days,
        )
        directory.record_loan(loan)

        logger.info(
            "Loan %s: '%s' lent to %s by %s",
            loan.id,
            book.title,
            patron.name,
            librarian.name,
        )
        return LoanResult(
            success=True,
            outcome=LoanOutcome.LOANED,
            patron_id=patron_id,
            book_isbn=isbn,
            loan=loan,
        )

    @staticmethod
    def _reject(outcome: LoanOutcome, patron_id: str, isbn: str) -> LoanResult:
        result = LoanResult(
            success=False, outcome=outcome, patron_id=patron_id, book_isbn=isbn
        )
        logger.warning(
            "Loan rejected (patron=%s, book=%s): %s", patron_id, isbn, result.message
        )
        return result
