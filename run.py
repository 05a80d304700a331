"""Entry point for the library lending demo."""

import argparse
import asyncio
import logging

from src.config import load_config
from src.demo import run_demo
from src.ingestion.loader import load_library
from src.storage.directory import LibraryDirectory


def main() -> None:
    """Load the sample catalog and replay the demo loans and returns."""
    parser = argparse.ArgumentParser(description="Library lending demo")
    parser.add_argument("--config", default="config.yaml", help="Path to config YAML")
    parser.add_argument("--data", default=None, help="Path to sample catalog YAML")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    directory = load_library(
        args.data or config.sample_data_path,
        LibraryDirectory(name=config.app.library_name),
    )
    asyncio.run(run_demo(config, directory))


if __name__ == "__main__":
    main()
