"""``routemap match`` — test a path against a pattern.

Prints the extracted parameters as JSON.  Exits with code 1 when the
path does not match or cannot be decoded.
"""

import argparse
import json
import sys

from routemap.errors import InvalidEncoding
from routemap.match import match_route


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.path`` against ``args.pattern``."""
    try:
        params = match_route(args.pattern, args.path)
    except InvalidEncoding as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if params is None:
        print("no match")
        raise SystemExit(1)

    print(json.dumps(params, ensure_ascii=False))
