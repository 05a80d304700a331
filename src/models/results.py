"""Workflow outcome models."""

from enum import Enum

from pydantic import BaseModel

from src.models.loan import Loan


class LoanOutcome(str, Enum):
    """Reason code attached to every lending or return result."""

    LOANED = "loaned"
    RETURNED = "returned"
    PATRON_NOT_FOUND = "patron_not_found"
    BOOK_NOT_FOUND = "book_not_found"
    LIBRARIAN_NOT_FOUND = "librarian_not_found"
    LOAN_LIMIT_REACHED = "loan_limit_reached"
    BOOK_UNAVAILABLE = "book_unavailable"
    BORROW_FAILED = "borrow_failed"
    BOOK_NOT_HELD = "book_not_held"
    RETURN_FAILED = "return_failed"
    LOAN_NOT_FOUND = "loan_not_found"


# Human-readable messages for each outcome
OUTCOME_MESSAGES: dict[LoanOutcome, str] = {
    LoanOutcome.LOANED: "Loan completed successfully",
    LoanOutcome.RETURNED: "Return completed successfully",
    LoanOutcome.PATRON_NOT_FOUND: "Patron not found",
    LoanOutcome.BOOK_NOT_FOUND: "Book not found",
    LoanOutcome.LIBRARIAN_NOT_FOUND: "Librarian not found",
    LoanOutcome.LOAN_LIMIT_REACHED: "Patron has reached the loan limit",
    LoanOutcome.BOOK_UNAVAILABLE: "Book not available",
    LoanOutcome.BORROW_FAILED: "Failed to lend a copy",
    LoanOutcome.BOOK_NOT_HELD: "Patron does not hold this book",
    LoanOutcome.RETURN_FAILED: "Failed to return the copy",
    LoanOutcome.LOAN_NOT_FOUND: "No active loan matches this return",
}


class LoanResult(BaseModel):
    """Outcome of a lending or return request.

    Truthy exactly when the request succeeded.
    """

    success: bool
    outcome: LoanOutcome
    patron_id: str
    book_isbn: str
    loan: Loan | None = None

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome]

    def __bool__(self) -> bool:
        return self.success


class LibrarySummary(BaseModel):
    """Aggregate counts over a library directory."""

    total_books: int = 0
    total_patrons: int = 0
    total_librarians: int = 0
    active_loans: int = 0
    completed_loans: int = 0
    available_copies: int = 0
    lent_copies: int = 0
