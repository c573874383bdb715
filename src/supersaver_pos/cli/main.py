"""
Command line entry point for the SuperSaver POS terminal
"""

import argparse
import logging
import sys
from datetime import date
from typing import Any, Dict, List, Optional

from supersaver_pos.cli.controller import PosController
from supersaver_pos.config.config_loader import ConfigLoader
from supersaver_pos.config.pos_config import PosConfig
from supersaver_pos.exceptions import (
    CatalogParseError,
    ConfigError,
    ReportWriteError,
    ValidationError,
)
from supersaver_pos.receipts.receipt_format import format_amount
from supersaver_pos.receipts.revenue_aggregator import RevenueAggregator
from supersaver_pos.services.session import PosSession
from supersaver_pos.utils.logger import configure_logging


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value}") from None


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="supersaver-pos",
        description="SuperSaver point-of-sale terminal",
    )
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--catalog", dest="catalog_path", help="Item catalog file")
    parser.add_argument("--receipts-dir", dest="receipts_dir", help="Directory for receipts and reports")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (default: WARNING)")
    parser.add_argument("--no-env", action="store_true", help="Ignore POS_* environment variables")
    sub = parser.add_subparsers(dest="command")

    report_p = sub.add_parser("report", help="Generate a revenue report and exit")
    report_p.add_argument("start", type=_iso_date, help="Start date (YYYY-MM-DD)")
    report_p.add_argument("end", type=_iso_date, help="End date (YYYY-MM-DD)")

    init_p = sub.add_parser("init-config", help="Write a configuration template")
    init_p.add_argument("path", help="Where to write the template")

    return parser


def load_config(args: argparse.Namespace) -> PosConfig:
    """Resolve configuration from file, environment and command line options"""
    overrides: Dict[str, Any] = {
        "catalog_path": args.catalog_path,
        "receipts_dir": args.receipts_dir,
        "log_level": args.log_level,
    }
    return ConfigLoader().load(file=args.config, env=not args.no_env, config=overrides)


def setup_logging(config: PosConfig) -> None:
    """
    Install log handlers for the resolved configuration

    Raises:
        ConfigError: If the configured log file cannot be opened
    """
    try:
        configure_logging(config.log_level, config.log_file)
    except OSError as e:
        raise ConfigError(
            f"Cannot open log file {config.log_file}: {e}",
            code="CONFIG_LOG_FILE_ERROR",
            cause=e,
        ) from e


def report_cmd(config: PosConfig, start: date, end: date) -> int:
    aggregator = RevenueAggregator.from_config(config)
    try:
        summary, report_path = aggregator.generate_report(start, end)
    except ValidationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except ReportWriteError as e:
        print(f"Error writing revenue report: {e}", file=sys.stderr)
        return EXIT_FAILURE

    for skipped in summary.skipped:
        print(f"Skipped {skipped.file_name}: {skipped.reason}", file=sys.stderr)
    print(f"Receipts counted: {summary.receipt_count}")
    print(f"Total Revenue: {format_amount(summary.total_revenue, config.currency_marker)}")
    print(f"Revenue Report generated: {report_path}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "init-config":
        try:
            ConfigLoader().create_template(args.path)
        except OSError as e:
            print(f"Cannot write configuration template: {e}", file=sys.stderr)
            return EXIT_FAILURE
        print(f"Configuration template written to {args.path}")
        return EXIT_OK

    try:
        config = load_config(args)
        setup_logging(config)
    except (ConfigError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.command == "report":
        return report_cmd(config, args.start, args.end)

    try:
        session = PosSession.from_config(config)
    except CatalogParseError as e:
        logger.critical("%s", e.get_description())
        print(f"Catalog load aborted: {e}", file=sys.stderr)
        return EXIT_FAILURE

    controller = PosController(session, config)
    return controller.run()


if __name__ == "__main__":
    sys.exit(main())
