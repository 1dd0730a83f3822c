"""Routemap CLI — inspect route trees, match paths, generate URLs.

Entry point registered as ``routemap`` in ``pyproject.toml``::

    [project.scripts]
    routemap = "routemap.cli:main"
"""

import argparse
import logging
import sys

from routemap.config import LOG_LEVELS, RoutemapConfig
from routemap.errors import ConfigurationError


def _pair(text: str) -> tuple[str, str]:
    """Parse a ``key=value`` command-line argument."""
    key, sep, value = text.partition("=")
    if not sep or not key:
        msg = f"expected key=value, got {text!r}"
        raise argparse.ArgumentTypeError(msg)
    return key, value


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routemap`` command."""
    parser = argparse.ArgumentParser(
        prog="routemap",
        description="routemap — named URL patterns: generate, match, and list routes.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=sorted(LOG_LEVELS),
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routemap routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the patterns of a route tree")
    routes_parser.add_argument(
        "tree",
        help="Import string (e.g. myapp.urls:routes)",
    )
    routes_parser.add_argument(
        "--separator",
        default=".",
        help="Separator joining nested route names (default: .)",
    )

    # -- routemap match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a path against a pattern")
    match_parser.add_argument("pattern", help="Route pattern (e.g. /users/:id)")
    match_parser.add_argument("path", help="Path to test, query string allowed")

    # -- routemap generate ------------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Generate a URL from a pattern")
    generate_parser.add_argument("pattern", help="Route pattern (e.g. /users/:id)")
    generate_parser.add_argument(
        "params",
        nargs="*",
        type=_pair,
        metavar="name=value",
        help="Parameter values",
    )
    generate_parser.add_argument(
        "-q",
        "--query",
        action="append",
        type=_pair,
        default=[],
        metavar="key=value",
        help="Query string entry (repeatable, order is kept)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = RoutemapConfig(
        key_separator=getattr(args, "separator", "."),
        log_level=args.log_level,
    )
    _configure(config)

    if args.command == "routes":
        from routemap.cli._routes import run_routes

        run_routes(args, config)
    elif args.command == "match":
        from routemap.cli._match import run_match

        run_match(args)
    elif args.command == "generate":
        from routemap.cli._generate import run_generate

        run_generate(args)


def _configure(config: RoutemapConfig) -> None:
    """Validate *config* and set up logging for a CLI run."""
    try:
        config.validate()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
