"""CLI for Pulse Report."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator, model_validator

from pulse_report.config import (
    PulseConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from pulse_report.data import Category, FeedKind
from pulse_report.view import render

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path | None = None
    search: str | None = None
    category: Category | None = None
    more: list[FeedKind] = []
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @model_validator(mode="after")
    def search_or_category(self) -> "CLIArgs":
        if self.search is not None and self.category is not None:
            raise ValueError("Use either --search or --category, not both")
        return self


async def run(args: CLIArgs) -> str:
    """Load the feeds, apply the requested actions and render the page.

    Args:
        args: Validated CLI arguments.

    Returns:
        The rendered page.
    """
    config = load_config(args.config) if args.config else PulseConfig()
    controller, session_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    await controller.initial_load()
    for feed in args.more:
        await controller.load_more(feed)
    if args.search is not None:
        await controller.search(args.search)
    elif args.category is not None:
        await controller.select_category(args.category)

    if session_logger:
        path = session_logger.finish_session()
        if path:
            logger.info(f"Session log written to: {path}")

    return render(
        controller.state,
        national_label=config.feeds.national.label,
        international_label=config.feeds.international.label,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="National and international headlines.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml if present)",
    )
    parser.add_argument("--search", "-s", help="Search query")
    parser.add_argument(
        "--category",
        choices=[c.value for c in Category],
        help="Show a single category instead of the default feeds",
    )
    parser.add_argument(
        "--more",
        action="append",
        default=[],
        choices=[f.value for f in FeedKind],
        help="Load the next page of a feed (repeatable)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON session log of every fetch",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args(argv)
    config_path: Path | None = ns.config
    if config_path is None and get_default_config_path().exists():
        config_path = get_default_config_path()

    try:
        args = CLIArgs(
            config=config_path,
            search=ns.search,
            category=ns.category,
            more=ns.more,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        print(asyncio.run(run(args)))
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
