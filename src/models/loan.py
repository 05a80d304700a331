"""Loan data model."""

import asyncio
from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import uuid4

from pydantic import BaseModel, Field

DEFAULT_LOAN_DURATION_DAYS = 10


def new_loan_id() -> str:
    return f"LOAN-{uuid4().hex}"


class Loan(BaseModel):
    """A single lending transaction.

    A loan is active until ``completed_at`` is set. Overdue days are only
    tracked while the loan is active; a completed loan always reports 0.
    """

    id: str = Field(default_factory=new_loan_id)
    patron_id: str
    book_isbn: str
    librarian_id: str
    started_at: datetime = Field(default_factory=datetime.now)
    duration_days: int = Field(default=DEFAULT_LOAN_DURATION_DAYS, ge=1)
    completed_at: datetime | None = None

    @property
    def active(self) -> bool:
        return self.completed_at is None

    @property
    def due_at(self) -> datetime:
        return self.started_at + timedelta(days=self.duration_days)

    def overdue_days(self, now: datetime | None = None) -> int:
        """Whole days past the due date, or 0 once the loan is completed."""
        if not self.active:
            return 0
        current = now or datetime.now()
        return max(0, (current - self.due_at) // timedelta(days=1))

    async def complete(
        self,
        clock: Callable[[], datetime] | None = None,
        latency: float = 0.0,
    ) -> None:
        """Mark the loan returned.

        Args:
            clock: Source of the completion timestamp, read after the delay.
            latency: Simulated delay in seconds before the timestamp is set.
        """
        await asyncio.sleep(latency)
        self.completed_at = (clock or datetime.now)()

    def describe(self, now: datetime | None = None) -> str:
        status = "Active" if self.active else "Completed"
        return f"Loan {self.id} - {status} | Overdue: {self.overdue_days(now)} days"
