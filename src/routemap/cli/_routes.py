"""``routemap routes`` — list the patterns of a route tree.

Resolves an import string to a route tree and prints every leaf with
its dotted key and pattern.
"""

import argparse
import sys

from routemap.cli._resolve import resolve_routes
from routemap.config import RoutemapConfig
from routemap.errors import ConfigurationError
from routemap.patterns import param_names
from routemap.tree import flatten_routes


def run_routes(args: argparse.Namespace, config: RoutemapConfig) -> None:
    """Print a KEY / PATTERN / PARAMS table for ``args.tree``."""
    try:
        routes = resolve_routes(args.tree)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    flat = flatten_routes(routes, separator=config.key_separator)
    if not flat:
        print("No routes defined.")
        return

    rows = [(key, pattern, ", ".join(param_names(pattern))) for key, pattern in flat.items()]

    max_key = max(max(len(r[0]) for r in rows), config.column_width)
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_key}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("KEY", "PATTERN", "PARAMS").rstrip())
    sep_len = max_key + max_pattern + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for key, pattern, params in rows:
        print(fmt.format(key, pattern, params).rstrip())
