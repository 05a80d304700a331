"""Scripted walkthrough of the lending and return workflows."""

import asyncio

from src.config import AppConfig
from src.models.results import LoanResult
from src.reporting.console import ConsoleReporter
from src.services.lending import LendingService
from src.services.returns import ReturnService
from src.storage.directory import LibraryDirectory

# (label, patron_id, isbn, librarian_id)
LOAN_SCRIPT: list[tuple[str, str, str, str]] = [
    ("Loan 1", "U001", "978-8535902775", "B001"),
    ("Loan 2", "U002", "978-8595084752", "B002"),
    ("Loan 3", "U003", "978-8535902775", "B001"),
    ("Loan 4", "U001", "978-8535902775", "B002"),
    ("Loan 5", "U001", "978-8573261425", "B001"),
    ("Loan 6", "U001", "978-8535914846", "B001"),
    ("Loan 7", "U001", "978-8576572003", "B001"),
]

# (label, patron_id, isbn)
RETURN_SCRIPT: list[tuple[str, str, str]] = [
    ("Return 1", "U001", "978-8535902775"),
    ("Return 2", "U002", "978-8595084752"),
    ("Return 3", "U001", "978-8576572003"),
    ("Return 4", "U001", "978-8573261425"),
    ("Return 5", "U001", "978-8535914846"),
    ("Return 6", "U003", "978-8535902775"),
]


async def run_demo(
    config: AppConfig,
    directory: LibraryDirectory,
    reporter: ConsoleReporter | None = None,
) -> list[LoanResult]:
    """Replay the sample loans and returns, printing each step.

    Args:
        config: Application configuration (rules and latencies).
        directory: A directory already populated with the sample catalog.
        reporter: Reporter used for output. Defaults to printing to stdout.

    Returns:
        Every workflow result, loans first, in script order.
    """
    reporter = reporter or ConsoleReporter(directory)
    lending = LendingService(directory, config.lending, config.latency)
    returns = ReturnService(directory, config.latency)
    results: list[LoanResult] = []

    reporter.show(f" {config.app.name.upper()} - {directory.name}")
    reporter.show("=" * 50)
    reporter.show("\n INITIAL STATE:")
    reporter.show(reporter.render_catalog())
    reporter.show(reporter.render_patrons())
    reporter.show(reporter.render_librarians())
    reporter.show(reporter.render_summary())

    librarian = directory.find_librarian_by_id(LOAN_SCRIPT[0][3])
    if librarian is not None:
        authenticated = await librarian.authenticate(
            librarian.secret.get_secret_value(), config.latency.authentication
        )
        reporter.show(f"\n Librarian {librarian.name} authenticated: {authenticated}")

    reporter.show("\n STARTING LOANS")
    reporter.show("=" * 40)
    for label, patron_id, isbn, librarian_id in LOAN_SCRIPT:
        reporter.show(f"\n {label}")
        result = await lending.request_loan(patron_id, isbn, librarian_id)
        reporter.show(reporter.render_result(result))
        results.append(result)

    reporter.show("\n STATE AFTER LOANS")
    reporter.show(reporter.render_catalog())
    reporter.show(reporter.render_active_loans())
    reporter.show(reporter.render_summary())

    reporter.show(f"\n Waiting {config.latency.demo_pause:g} seconds before returns")
    await asyncio.sleep(config.latency.demo_pause)

    reporter.show("\n STARTING RETURNS")
    reporter.show("=" * 40)
    for label, patron_id, isbn in RETURN_SCRIPT:
        reporter.show(f"\n {label}")
        result = await returns.request_return(patron_id, isbn)
        reporter.show(reporter.render_result(result))
        results.append(result)

    reporter.show("\n FINAL STATE")
    reporter.show(reporter.render_summary())
    reporter.show(reporter.render_catalog())
    reporter.show(reporter.render_active_loans())
    reporter.show("\n DONE")
    return results
