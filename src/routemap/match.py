"""Path matching against route patterns.

Tests whether a pathname has the shape of a pattern and extracts the
parameter values::

    match_route("/blog/posts/:id", "/blog/posts/42?tab=comments")
    # -> {"id": "42"}

    match_route("/products/:id", "/login")
    # -> None

A non-matching path returns ``None`` rather than raising, since callers
usually probe several candidate patterns in turn.  A fully literal
pattern that matches returns ``{}``.
"""

import logging
import re
from urllib.parse import unquote

from routemap.errors import InvalidEncoding
from routemap.patterns import parse_pattern, split_path

logger = logging.getLogger("routemap.match")

# A "%" that does not start a two-digit hex escape
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_component(segment: str, pattern: str = "") -> str:
    """Percent-decode a single path segment.

    Raises ``InvalidEncoding`` for a stray ``%`` or for escapes that do
    not decode as UTF-8.  The raw segment is never passed through.
    """
    if "%" not in segment:
        return segment
    if _BAD_ESCAPE.search(segment):
        raise InvalidEncoding(segment=segment, pattern=pattern)
    try:
        return unquote(segment, errors="strict")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(segment=segment, pattern=pattern) from exc


def match_route(pattern: str, pathname: str) -> dict[str, str] | None:
    """Match *pathname* against *pattern* and extract parameter values.

    The query suffix of *pathname* is ignored.  Segment counts must be
    equal (no prefix matching, no trailing-slash normalization), literal
    segments must be equal byte for byte, and parameter segments bind
    their decoded value, the empty string included.  When a name occurs
    more than once in *pattern*, every occurrence must decode to the same
    value.

    Returns the parameter mapping on success, ``None`` otherwise.
    """
    segments = parse_pattern(pattern)
    parts = split_path(pathname)

    if len(segments) != len(parts):
        logger.debug("%r !~ %r: %d segments, expected %d", pathname, pattern, len(parts), len(segments))
        return None

    params: dict[str, str] = {}
    for seg, part in zip(segments, parts, strict=True):
        if not seg.is_param:
            if seg.value != part:
                logger.debug("%r !~ %r: %r != %r", pathname, pattern, part, seg.value)
                return None
            continue

        name = seg.param_name or ""
        value = decode_component(part, pattern)
        if params.get(name, value) != value:
            logger.debug("%r !~ %r: conflicting values for %r", pathname, pattern, name)
            return None
        params[name] = value

    return params
