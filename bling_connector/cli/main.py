"""Main CLI entry point for the Bling connector."""

import argparse
import json
import logging
import os
import sys

from bling_connector.bling import Bling
from bling_connector.core import (
    EntityDomain,
    ClientSettings,
    BlingError,
    ConfigurationError,
    APIError,
    load_settings,
    load_saved_settings,
    save_settings,
    settings_path,
)
from bling_connector.entities import ENTITY_CLASSES

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
    # Suppress httpx INFO logs for cleaner output
    logging.getLogger("httpx").setLevel(logging.WARNING)


def parse_params(pairs: list[str] | None) -> dict[str, str]:
    """
    Parse 'key=value' pairs into a query parameter dict.

    Raises:
        ValueError: If a pair has no '='
    """
    params: dict[str, str] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise ValueError(f"Invalid parameter '{pair}'. Expected key=value")
        key, value = pair.split("=", 1)
        params[key.strip()] = value.strip()
    return params


def resolve_token(args) -> str:
    """Get the access token from --token or BLING_ACCESS_TOKEN."""
    token = args.token or os.getenv("BLING_ACCESS_TOKEN")
    if not token:
        raise ConfigurationError(
            "No token provided. Use --token or set BLING_ACCESS_TOKEN."
        )
    return token


def cmd_domains(args):
    """Handle the domains command."""
    print(f"{'Domain':<30} {'Endpoint':<30} Mode")
    print("-" * 70)
    for domain in EntityDomain:
        entity_class = ENTITY_CLASSES[domain]
        mode = "read-only" if entity_class.read_only else "read-write"
        print(f"{domain.value:<30} {entity_class.endpoint:<30} {mode}")


def cmd_fetch(args):
    """Handle the fetch command."""
    try:
        params = parse_params(args.param)
        token = resolve_token(args)
        settings = load_settings()

        logger.debug(f"Fetching '{args.domain}' from {settings.base_url}")
        with Bling(token, settings=settings) as bling:
            module = bling.get_module(args.domain)
            if args.id:
                result = module.find(args.id, params=params or None)
            else:
                result = module.find_all(params or None)

        print(json.dumps(result, indent=2, ensure_ascii=False))

    except APIError as e:
        print(f"API error: {e}", file=sys.stderr)
        if e.fields:
            for field in e.fields:
                print(f"  - {field.get('element')}: {field.get('msg')}", file=sys.stderr)
        sys.exit(1)
    except (BlingError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_config_show(args):
    """Handle the config show command."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Settings file: {settings_path()}")
    for key, value in settings.to_dict().items():
        print(f"  {key}: {value}")


def cmd_config_set(args):
    """Handle the config set command."""
    try:
        current = load_saved_settings()
        settings = ClientSettings(
            base_url=args.base_url or current.base_url,
            timeout_seconds=args.timeout if args.timeout is not None else current.timeout_seconds,
            max_retries=args.max_retries if args.max_retries is not None else current.max_retries,
        )
        path = save_settings(settings)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Settings saved to: {path}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bling-connector",
        description="Bling ERP connector CLI",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Domains command
    domains_parser = subparsers.add_parser("domains", help="List supported domains")
    domains_parser.set_defaults(func=cmd_domains)

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="List or show records of a domain")
    fetch_parser.add_argument("domain", help="Domain name (e.g., 'contatos', 'contas-pagar')")
    fetch_parser.add_argument("--id", help="Record ID (lists records if omitted)")
    fetch_parser.add_argument(
        "--param",
        action="append",
        help="Query parameter as key=value (repeatable)",
    )
    fetch_parser.add_argument("--token", help="Access token (or set BLING_ACCESS_TOKEN env var)")
    fetch_parser.set_defaults(func=cmd_fetch)

    # Config command
    config_parser = subparsers.add_parser("config", help="Show or change connection settings")
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    show_parser = config_subparsers.add_parser("show", help="Show effective settings")
    show_parser.set_defaults(func=cmd_config_show)

    set_parser = config_subparsers.add_parser("set", help="Save settings")
    set_parser.add_argument("--base-url", help="API base URL")
    set_parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    set_parser.add_argument("--max-retries", type=int, help="Maximum attempts per request")
    set_parser.set_defaults(func=cmd_config_set)

    return parser


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not getattr(args, "func", None):
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
