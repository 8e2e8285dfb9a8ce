from __future__ import annotations

import argparse
import logging
from datetime import datetime
from typing import Optional, Sequence

from .bootstrap import configure_logging
from .config import get_settings
from .errors import ValidationError
from .scheduling import WindowPolicy, parse_instant, period_window


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Venue Calendar command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API server.")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)

    window_parser = subparsers.add_parser("window", help="Print the default event query window.")
    window_parser.add_argument("--anchor", default=None, help="RFC 3339 instant to anchor the window on.")
    window_parser.add_argument(
        "--policy",
        choices=[policy.value for policy in WindowPolicy],
        default=None,
        help="Calendar period to use; defaults to the configured policy.",
    )

    return parser


def _print_window(anchor: Optional[str], policy: Optional[str]) -> None:
    resolved_policy = WindowPolicy(policy or get_settings().calendar.window_policy)
    anchor_dt: Optional[datetime] = parse_instant(anchor, "anchor") if anchor else None
    window = period_window(anchor_dt or datetime.now().astimezone(), resolved_policy)
    print(f"{window.start.isoformat()} {window.end.isoformat()}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        configure_logging()
        logging.getLogger(__name__).info("Venue Calendar API starting")
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "window":
        try:
            _print_window(args.anchor, args.policy)
        except ValidationError as exc:
            parser.error(str(exc))
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
