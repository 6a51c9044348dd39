"""
Command-line interface for the tax address normalizer.
"""

import argparse
import json
import sys
from contextlib import nullcontext
from typing import Optional

from . import __version__
from .address import (
    AddressBuilder,
    AddressNormalizer,
    CountryRepository,
    InMemoryCountryDirectory,
    ScopedFieldLimitsProvider,
    ZipCodeFixer,
)
from .utils.config import Config
from .utils.logging import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Tax Address - normalize addresses for a tax calculation provider",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tax-address --version
  tax-address normalize --street "123 Main St" --city Springfield --country US --region-id 13 --postal-code 62704 --directory-file countries.json
  tax-address normalize --street "1 Infinite Loop" --country US --region CA --env-file .env
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Tax Address {__version__}",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--log-file",
        help="Log file path",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
    )

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Normalize an address and print it as JSON",
    )
    normalize_parser.add_argument(
        "--street",
        action="append",
        default=[],
        help="Street line (repeat for multiple lines)",
    )
    normalize_parser.add_argument("--city", help="City")
    normalize_parser.add_argument("--country", help="Two-letter country code")
    normalize_parser.add_argument("--region", help="Free-text region; wins over --region-id")
    normalize_parser.add_argument("--region-id", help="Region identifier resolved against the country's regions")
    normalize_parser.add_argument("--postal-code", help="Postal code")
    normalize_parser.add_argument("--scope-code", help="Configuration scope code (default: from config)")
    normalize_parser.add_argument("--scope-type", help="Configuration scope type (default: from config)")
    normalize_parser.add_argument(
        "--directory-file",
        help="JSON country directory; MongoDB is used when omitted and DB_CONNECTION_URL is set",
    )
    normalize_parser.add_argument(
        "--env-file",
        help="Load configuration from this .env file",
    )

    return parser


def _country_resolver(config: Config, directory_file: Optional[str]):
    if directory_file:
        return nullcontext(InMemoryCountryDirectory.from_json_file(directory_file))
    if config.get("mongo_url"):
        return CountryRepository(config=config)
    return nullcontext(InMemoryCountryDirectory())


def normalize_address(parsed_args: argparse.Namespace, config: Config) -> dict:
    """
    Normalize the address described by the parsed command line.

    Args:
        parsed_args: Namespace produced by the ``normalize`` subcommand
        config: Loaded configuration (limits, scope, MongoDB settings)

    Returns:
        The normalized address keyed by provider field names
    """
    limits_provider = ScopedFieldLimitsProvider.from_config(config)
    scope_code = parsed_args.scope_code or config.get("scope_code")
    scope_type = parsed_args.scope_type or config.get("scope_type")

    with _country_resolver(config, parsed_args.directory_file) as resolver:
        normalizer = AddressNormalizer(resolver, limits_provider, ZipCodeFixer())
        address = (
            AddressBuilder(normalizer)
            .set_street(parsed_args.street)
            .set_city(parsed_args.city)
            .set_country_code(parsed_args.country)
            .set_region(parsed_args.region)
            .set_region_id(parsed_args.region_id)
            .set_postal_code(parsed_args.postal_code)
            .set_scope_code(scope_code)
            .set_scope_type(scope_type)
            .build()
        )
    return address.to_dict()


def main(args: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    config = Config(getattr(parsed_args, "env_file", None))
    log_level = "DEBUG" if parsed_args.verbose else config.get("log_level")
    logger = setup_logging(level=log_level, log_file=parsed_args.log_file)

    try:
        if parsed_args.command == "normalize":
            payload = normalize_address(parsed_args, config)
            print(json.dumps(payload, indent=2, ensure_ascii=False))

        elif not parsed_args.command:
            parser.print_help()
            return 1

    except Exception as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
