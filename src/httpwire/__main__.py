"""
=============================================================================
HTTPWIRE CLI ENTRY POINT
=============================================================================

Issues one GET request and prints the decoded response.

=============================================================================
USAGE
=============================================================================

    # Fetch a page, print the body
    python -m httpwire http://localhost/

    # Show the status line and headers too
    python -m httpwire --headers https://example.com/

    # Only advertise gzip, short timeout, verbose framing logs
    python -m httpwire --accept-encoding gzip --timeout 5 --log-level DEBUG URL

=============================================================================
BODY DISPLAY
=============================================================================

    Content-Type              Output
    ────────────────────────  ──────────────────────────────────────────
    text/html; charset=X      body decoded with charset X
    text/html                 body decoded as UTF-8
    anything else / absent    hex dump (offset : hex bytes - ASCII)

=============================================================================
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import LOG_LEVELS, ClientConfig
from .core.connection import Target, fetch
from .http.errors import HTTPWireError
from .http.response import ResponseMessage


logger = logging.getLogger("httpwire.cli")


def setup_logging(level: str) -> None:
    """Configure console logging for the CLI."""
    numeric = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("httpwire").setLevel(numeric)


def render_body(response: ResponseMessage) -> str:
    """Render the body as text for HTML, as a hex dump otherwise."""
    content_type = response.content_type
    if content_type is not None and content_type.media_type == "text/html":
        return response.text()
    return response.body.hexdump()


def render_headers(response: ResponseMessage) -> str:
    lines = [response.status_line]
    lines.extend(f"{item.name}: {item.value}" for item in response.headers)
    return "\n".join(lines) + "\n"


def build_parser() -> argparse.ArgumentParser:
    env = ClientConfig.from_env()

    parser = argparse.ArgumentParser(
        prog="httpwire",
        description="Send one HTTP/1.1 GET request and print the decoded response",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m httpwire http://localhost/                 # Print body
  python -m httpwire --headers https://example.com/    # Status + headers + body
  python -m httpwire --accept-encoding gzip URL        # Only accept gzip
        """
    )

    parser.add_argument("url", help="Absolute http:// or https:// URL")

    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=env.timeout,
        help=f"Socket timeout in seconds (default: {env.timeout})"
    )

    parser.add_argument(
        "--accept-encoding", "-e",
        default=env.accept_encoding,
        help=f"Accept-Encoding request header (default: {env.accept_encoding!r})"
    )

    parser.add_argument(
        "--log-level", "-l",
        type=str.upper,
        choices=LOG_LEVELS,
        default=env.log_level.upper(),
        help=f"Logging level (default: {env.log_level})"
    )

    parser.add_argument(
        "--headers", "-i",
        action="store_true",
        help="Print the status line and headers before the body"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"httpwire {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit status: 0 on success, 1 on any failure.
    """
    try:
        # Defaults come from the environment; bad values fail here
        parser = build_parser()
    except ValueError as e:
        print(f"Error: invalid environment configuration: {e}", file=sys.stderr)
        return 1

    args = parser.parse_args(argv)

    config = ClientConfig(
        timeout=args.timeout,
        accept_encoding=args.accept_encoding,
        log_level=args.log_level,
    )

    try:
        config.validate()
        target = Target.from_url(args.url)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)

    try:
        response = fetch(target, config)
        if args.headers:
            print(render_headers(response))
        print(render_body(response))
    except (HTTPWireError, OSError, LookupError, UnicodeDecodeError) as e:
        # LookupError: unknown charset name in Content-Type
        logger.error(f"Request to {target} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
