"""Main entry point for the portfolio dashboard."""
import argparse
import asyncio
import logging
import sys

from portfolio_dashboard.core.config import load_config, ConfigError
from portfolio_dashboard.core.dashboard import PortfolioDashboard
from portfolio_dashboard.models import Event, SheetLayout
from portfolio_dashboard.report import render_report

logger = logging.getLogger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="python -m portfolio_dashboard",
        description="Portfolio Dashboard - holdings and performance from a published spreadsheet",
    )

    parser.add_argument(
        "-c", "--config",
        default="config/default.yaml",
        help="Path to configuration file (default: config/default.yaml)",
    )

    parser.add_argument(
        "-l", "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO)",
    )

    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in SheetLayout],
        help="Override the sheet layout from the config file",
    )

    parser.add_argument(
        "--url",
        help="Override the sheet URL from the config file",
    )

    parser.add_argument(
        "--watch",
        type=float,
        metavar="SECONDS",
        help="Refresh every SECONDS instead of once",
    )

    return parser.parse_args(args)


def setup_logging(level: str) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level string (DEBUG, INFO, etc.)
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, level),
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    # Reduce noise from external libraries
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parsed_args = parse_args(args)

    setup_logging(parsed_args.log_level)

    logger.info("Portfolio dashboard starting...")
    logger.info(f"Config: {parsed_args.config}")

    dashboard = None

    try:
        config = load_config(parsed_args.config)

        if parsed_args.layout:
            config.sheet.layout = SheetLayout(parsed_args.layout)
        if parsed_args.url:
            config.source.url = parsed_args.url
        if parsed_args.watch is not None:
            config.refresh.interval_seconds = parsed_args.watch

        dashboard = PortfolioDashboard(config)

        def print_report(event: Event) -> None:
            print(render_report(dashboard.snapshot, config.display.top_allocations))
            print()

        dashboard.event_bus.subscribe(print_report)

        asyncio.run(dashboard.run(interval_seconds=config.refresh.interval_seconds))

        return 0

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        if dashboard:
            dashboard.stop()
        return 0

    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        if dashboard:
            dashboard.stop()
        return 1


if __name__ == "__main__":
    sys.exit(main())
