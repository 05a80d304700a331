"""Book data model."""

import asyncio

from pydantic import BaseModel, Field, model_validator


class Book(BaseModel):
    """A catalog title and its lendable copies.

    ``lent_copies`` only changes through :meth:`borrow_one_copy` and
    :meth:`return_one_copy`, which keep ``0 <= lent_copies <= total_copies``.
    """

    isbn: str
    title: str
    author: str = ""
    publication_year: int
    total_copies: int = Field(default=1, ge=0)
    lent_copies: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_lent_within_total(self) -> "Book":
        if self.lent_copies > self.total_copies:
            raise ValueError(
                f"lent_copies ({self.lent_copies}) exceeds "
                f"total_copies ({self.total_copies})"
            )
        return self

    @property
    def available_copies(self) -> int:
        return self.total_copies - self.lent_copies

    @property
    def available(self) -> bool:
        return self.available_copies > 0

    async def borrow_one_copy(self, latency: float = 0.0) -> bool:
        """Lend out one copy if any is on the shelf.

        Args:
            latency: Simulated I/O delay in seconds before committing.

        Returns:
            True if a copy was lent, False if none was available.
        """
        if not self.available:
            return False
        await asyncio.sleep(latency)
        if not self.available:  # taken while suspended
            return False
        self.lent_copies += 1
        return True

    async def return_one_copy(self, latency: float = 0.0) -> bool:
        """Put one lent copy back on the shelf.

        Args:
            latency: Simulated I/O delay in seconds before committing.

        Returns:
            True if a copy was returned, False if none was lent.
        """
        if self.lent_copies <= 0:
            return False
        await asyncio.sleep(latency)
        if self.lent_copies <= 0:
            return False
        self.lent_copies -= 1
        return True

    def describe(self) -> str:
        status = "Available" if self.available else "Unavailable"
        return (
            f"{self.title} - {self.author} ({self.publication_year}) | "
            f"{status} [{self.available_copies}/{self.total_copies}]"
        )
