"""``routemap generate`` — build a URL from a pattern and values."""

import argparse
import sys

from routemap.errors import MissingParameter
from routemap.generate import generate_route


def run_generate(args: argparse.Namespace) -> None:
    """Print the URL for ``args.pattern`` with ``args.params`` and ``args.query``.

    Exits with code 1 if a parameter of the pattern was not supplied.
    """
    try:
        url = generate_route(args.pattern, dict(args.params), dict(args.query))
    except MissingParameter as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(url)
