"""Loads a library catalog from a YAML document."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import yaml

from src.models.book import Book
from src.models.person import Librarian, Patron
from src.storage.directory import LibraryDirectory

logger = logging.getLogger(__name__)


def load_library(
    data_path: str | Path,
    directory: LibraryDirectory | None = None,
    clock: Callable[[], datetime] | None = None,
) -> LibraryDirectory:
    """Populate a directory from a YAML file.

    The document may contain ``name``, ``books``, ``patrons`` and
    ``librarians``; missing sections are treated as empty. Each record is
    validated into its model before registration.

    Args:
        data_path: Path to the YAML file.
        directory: Existing directory to populate. A new one is created
            when omitted.
        clock: Clock for a newly created directory.

    Returns:
        The populated LibraryDirectory.

    Raises:
        FileNotFoundError: If data_path does not exist.
        ValueError: If the document is not a mapping.
        pydantic.ValidationError: If a record is malformed.
    """
    path = Path(data_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {path}")

    if directory is None:
        directory = LibraryDirectory(name=data.get("name", "Library"), clock=clock)

    for record in data.get("books") or []:
        directory.add_book(Book(**record))
    for record in data.get("patrons") or []:
        directory.register_patron(Patron(**record))
    for record in data.get("librarians") or []:
        directory.register_librarian(Librarian(**record))

    logger.info(
        "Loaded %d books, %d patrons and %d librarians from %s",
        len(data.get("books") or []),
        len(data.get("patrons") or []),
        len(data.get("librarians") or []),
        path,
    )
    return directory
