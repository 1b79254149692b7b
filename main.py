#!/usr/bin/env python
"""CLI for fetching and printing NewsAPI headlines."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from headline_query.catalog import CATEGORIES, LANGUAGE_NAMES, parse_category, parse_language
from headline_query.config import create_from_config, get_default_config_path, load_config
from headline_query.data import Category, FilterState, Language, QueryResult

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str = ""
    category: Category | None = None
    language: Language | None = None
    page: int = 1
    config: Path

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def render(result: QueryResult, filters: FilterState, page_size: int) -> None:
    """Print the result the way the headline view displays it."""
    if result.error is not None:
        logger.error(f"Error: {result.error.message}")
        return

    if not result.articles:
        logger.info("No articles found.")
        return

    for i, article in enumerate(result.articles, 1):
        logger.info(f"{i}. {article.title}")
        if article.description:
            logger.info(f"   {article.description}")
        logger.info(f"   Read full article: {article.url}")
        if article.url_to_image:
            logger.info(f"   Image: {article.url_to_image}")

    total_pages = result.total_pages(page_size)
    if total_pages:
        logger.info(f"\nPage {filters.page} of {total_pages}")


async def run(args: CLIArgs) -> int:
    """Fetch one page of headlines for the given filters.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config)
    initial = FilterState(
        search_text=args.query,
        category=args.category,
        language=args.language,
        page=args.page,
    )
    client, session = create_from_config(config, initial=initial)
    result = await session.refresh()
    render(result, session.filters, client.page_size)
    return 0 if result.ok else 1


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Fetch news headlines from NewsAPI.")
    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Free-text search (ignored when a category is given)",
    )
    parser.add_argument(
        "--category",
        help=f"Headline category: {', '.join(CATEGORIES)}",
    )
    parser.add_argument(
        "--language",
        "-l",
        help=f"Language code or name: {', '.join(LANGUAGE_NAMES)}",
    )
    parser.add_argument(
        "--page",
        "-p",
        type=int,
        default=1,
        help="Result page, starting at 1 (default: 1)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            query=ns.query,
            category=parse_category(ns.category),
            language=parse_language(ns.language),
            page=ns.page,
            config=config_path,
        )
        exit_code = asyncio.run(run(args))
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
