"""
FireTruck API command line client

Sends a single request to the FireTruck API and prints the decoded JSON body.
"""

import argparse
import json
import os
import sys
from pathlib import Path

import requests

from .client import Client
from .config import config
from .exceptions import ConfigurationError, InvalidArgument, ResponseException
from .logging_config import get_module_logger, setup_logging
from .request_builder import HttpMethod

logger = get_module_logger("cli")

API_KEY_ENV = "FIRETRUCK_API_KEY"

EXIT_OK = 0
EXIT_RESPONSE_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_TRANSPORT_ERROR = 3


def _print_error_box(title: str, details: str, suggestions: str | None = None) -> None:
    """
    Log a formatted error box with title, details, and optional suggestions.

    Args:
        title: Error title/header
        details: Error details/description
        suggestions: Optional suggestions for resolving the error
    """
    logger.error("=" * 70)
    logger.error(title)
    logger.error("=" * 70)
    logger.error(details)
    if suggestions:
        logger.error("")
        logger.error(suggestions)
    logger.error("=" * 70)


def parse_key_value(item: str) -> tuple[str, str]:
    """Parse a KEY=VALUE command line item"""
    key, sep, value = item.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{item}'")
    return key, value


def parse_json_body(raw: str):
    """Parse --body as JSON, or load it from a file when prefixed with @"""
    if raw.startswith("@"):
        path = Path(raw[1:])
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise argparse.ArgumentTypeError(f"cannot read body file {path}: {e}") from e
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"body is not valid JSON: {e}") from e


def _collect_query(pairs: list[tuple[str, str]]) -> dict:
    """Group repeated query keys into lists"""
    query: dict = {}
    for key, value in pairs:
        if key in query:
            existing = query[key]
            query[key] = existing + [value] if isinstance(existing, list) else [existing, value]
        else:
            query[key] = value
    return query


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="firetruck",
        description="Send a request to the FireTruck API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Configuration:
  Defaults come from firetruck/config/api_config.yaml
  (or the directory named by FIRETRUCK_CONFIG_DIR).
  The API key is read from --api-key or ${API_KEY_ENV}.

Examples:
  firetruck GET domains/5791c9ef0f9d1f0001bdb56a
  firetruck GET domains --query filter[name]=example.com
  firetruck POST domains --body '{{"data": {{"type": "domains"}}}}'
  firetruck PATCH domains/123 --body @patch.json --insecure
        """,
    )

    parser.add_argument(
        "method",
        type=str.upper,
        choices=[m.value for m in HttpMethod],
        help="HTTP method",
    )
    parser.add_argument("path", help='Path relative to the API URL (e.g. "domains/123")')
    parser.add_argument(
        "--query",
        type=parse_key_value,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    parser.add_argument(
        "--header",
        type=parse_key_value,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra request header (repeatable)",
    )
    parser.add_argument(
        "--body",
        type=parse_json_body,
        help="JSON request body, or @file to read it from a file",
    )
    parser.add_argument("--api-key", help=f"FireTruck API key (default: ${API_KEY_ENV})")
    parser.add_argument(
        "--api-version",
        help=f"API version (default: {config.get('api.version', 'v1')})",
    )
    parser.add_argument(
        "--insecure", action="store_true", help="Do not verify the TLS peer certificate"
    )
    parser.add_argument("--log-file", type=Path, help="Also write debug logs to this file")
    parser.add_argument("--verbose", action="store_true", help="Log request lines")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    api_key = args.api_key or os.environ.get(API_KEY_ENV)
    if not api_key:
        _print_error_box(
            "MISSING API KEY",
            "No FireTruck API key was given.",
            f"Pass --api-key or set the {API_KEY_ENV} environment variable.",
        )
        return EXIT_USAGE_ERROR

    try:
        client = Client(api_key)
        if args.api_version:
            client.set_api_version(args.api_version)
        if args.insecure:
            client.set_verify(False)

        response = client.request(
            args.method,
            args.path,
            query=_collect_query(args.query),
            headers=dict(args.header),
            body=args.body,
        )
    except ResponseException as e:
        _print_error_box("FIRETRUCK API ERROR", f"Status Code: {e.status_code}")
        print(json.dumps(e.body, indent=2, ensure_ascii=False))
        return EXIT_RESPONSE_ERROR
    except (InvalidArgument, ConfigurationError) as e:
        _print_error_box("INVALID REQUEST", str(e))
        return EXIT_USAGE_ERROR
    except requests.RequestException as e:
        _print_error_box(
            "NETWORK ERROR",
            f"Error: {e}",
            "Check your connection and the configured base URL, then try again.",
        )
        return EXIT_TRANSPORT_ERROR

    print(json.dumps(response.body, indent=2, ensure_ascii=False))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
