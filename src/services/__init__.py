"""Lending and return workflows."""

from src.services.lending import LendingService
from src.services.returns import ReturnService

__all__ = ["LendingService", "ReturnService"]
