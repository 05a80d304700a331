"""Shared fixtures for the library lending tests."""

from datetime import datetime, timedelta

import pytest

from src.config import AppConfig, LatencyConfig
from src.models import Book, Librarian, Patron
from src.services import LendingService, ReturnService
from src.storage.directory import LibraryDirectory

START = datetime(2024, 3, 1, 9, 0, 0)


class FakeClock:
    """Manually advanced clock for deterministic timestamps."""

    def __init__(self, start: datetime = START) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        latency=LatencyConfig(
            loan_request=0,
            return_request=0,
            copy_transfer=0,
            loan_finalize=0,
            authentication=0,
            demo_pause=0,
        )
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def directory(clock: FakeClock) -> LibraryDirectory:
    directory = LibraryDirectory(name="Test Library", clock=clock)
    directory.add_book(
        Book(isbn="111", title="1984", author="George Orwell",
             publication_year=1949, total_copies=3)
    )
    directory.add_book(
        Book(isbn="222", title="Dom Casmurro", author="Machado de Assis",
             publication_year=1899, total_copies=1)
    )
    directory.add_book(
        Book(isbn="333", title="O Pequeno Príncipe", author="Antoine de Saint-Exupéry",
             publication_year=1943, total_copies=2)
    )
    directory.add_book(
        Book(isbn="444", title="Harry Potter e a Pedra Filosofal", author="J.K. Rowling",
             publication_year=1997, total_copies=5)
    )
    for i in range(1, 5):
        directory.register_patron(
            Patron(id=f"U00{i}", name=f"Patron {i}", registration_number=f"202400{i}")
        )
    directory.register_librarian(
        Librarian(id="B001", name="Gabriel Fernandes", role="Head Librarian", secret="senha123")
    )
    return directory


@pytest.fixture
def lending(directory: LibraryDirectory, config: AppConfig) -> LendingService:
    return LendingService(directory, config.lending, config.latency)


@pytest.fixture
def returns(directory: LibraryDirectory, config: AppConfig) -> ReturnService:
    return ReturnService(directory, config.latency)
