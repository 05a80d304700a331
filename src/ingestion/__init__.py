"""Catalog ingestion from data files."""

from src.ingestion.loader import load_library

__all__ = ["load_library"]
