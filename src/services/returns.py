"""Return workflow: closes an active loan and archives it."""

import asyncio
import logging

from src.config import LatencyConfig
from src.models.results import LoanOutcome, LoanResult
from src.storage.directory import LibraryDirectory

logger = logging.getLogger(__name__)


class ReturnService:
    """Processes book returns against a directory.

    A return with no matching active loan is reported as
    ``LOAN_NOT_FOUND``. By then the copy is back on the shelf and the
    patron no longer holds it; those changes stand and nothing is archived.
    """

    def __init__(
        self,
        directory: LibraryDirectory,
        latency: LatencyConfig | None = None,
    ) -> None:
        self._directory = directory
        self._latency = latency or LatencyConfig()

    async def request_return(self, patron_id: str, isbn: str) -> LoanResult:
        """Return one copy of a book held by a patron.

        Args:
            patron_id: Identifier of the returning patron.
            isbn: Catalog code of the returned book.

        Returns:
            A LoanResult; on success it carries the completed Loan.
        """
        async with self._directory.lock:
            await asyncio.sleep(self._latency.return_request)
            return await self._return(patron_id, isbn)

    async def _return(self, patron_id: str, isbn: str) -> LoanResult:
        directory = self._directory
        patron = directory.find_patron_by_id(patron_id)
        book = directory.find_book_by_id(isbn)

        if patron is None:
            return self._reject(LoanOutcome.PATRON_NOT_FOUND, patron_id, isbn)
        if book is None:
            return self._reject(LoanOutcome.BOOK_NOT_FOUND, patron_id, isbn)
        if not patron.holds_book(isbn):
            return self._reject(LoanOutcome.BOOK_NOT_HELD, patron_id, isbn)

        if not await book.return_one_copy(self._latency.copy_transfer):
            return self._reject(LoanOutcome.RETURN_FAILED, patron_id, isbn)

        patron.remove_held_book(isbn)
        loan = directory.find_active_loan(patron_id, isbn)
        if loan is None:
            logger.error(
                "Copy of '%s' returned by %s but no active loan was found",
                book.title,
                patron.name,
            )
            return self._reject(LoanOutcome.LOAN_NOT_FOUND, patron_id, isbn)

        await loan.complete(clock=directory.now, latency=self._latency.loan_finalize)
        directory.archive_loan(loan)

        logger.info("Loan %s closed: '%s' returned by %s", loan.id, book.title, patron.name)
        return LoanResult(
            success=True,
            outcome=LoanOutcome.RETURNED,
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
            "Return rejected (patron=%s, book=%s): %s", patron_id, isbn, result.message
        )
        return result
