"""People known to the library: patrons and librarians."""

import asyncio
import hmac

from pydantic import BaseModel, Field, SecretStr


class Person(BaseModel):
    """Fields shared by everyone registered with the library."""

    id: str
    name: str
    email: str = ""

    def describe(self) -> str:
        return self.name


class Patron(Person):
    """A registered borrower.

    ``held_books`` keeps the ISBNs in acquisition order. Duplicates are
    allowed; removal drops the first occurrence only.
    """

    registration_number: str
    held_books: list[str] = Field(default_factory=list)

    @property
    def held_count(self) -> int:
        return len(self.held_books)

    def add_held_book(self, isbn: str) -> None:
        self.held_books.append(isbn)

    def remove_held_book(self, isbn: str) -> None:
        if isbn in self.held_books:
            self.held_books.remove(isbn)

    def holds_book(self, isbn: str) -> bool:
        return isbn in self.held_books

    def describe(self) -> str:
        return f"{self.name} ({self.registration_number}) - Books: {self.held_count}"


class Librarian(Person):
    """Staff member who authorizes loans."""

    role: str
    secret: SecretStr

    async def authenticate(self, secret: str, latency: float = 0.0) -> bool:
        """Check a credential against the stored secret.

        Not enforced by the lending workflow; callers that need it must
        invoke it themselves.
        """
        await asyncio.sleep(latency)
        return hmac.compare_digest(
            self.secret.get_secret_value().encode(), secret.encode()
        )

    def describe(self) -> str:
        return f"{self.name} - {self.role}"
