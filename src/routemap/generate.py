"""URL generation from route patterns.

Substitutes ``:param`` segments with percent-encoded values and appends
an optional query string::

    generate_route("/blog/posts/:id", {"id": 42})
    # -> "/blog/posts/42"

    generate_route("/blog/posts/:id", {"id": 42}, {"tab": "comments", "page": 2})
    # -> "/blog/posts/42?tab=comments&page=2"

    generate_route("/login")
    # -> "/login"
"""

from collections.abc import Mapping
from urllib.parse import quote

from routemap.errors import MissingParameter
from routemap.patterns import QUERY_DELIMITER, SEPARATOR, has_params, parse_pattern

type ParamValue = str | int | float
type QueryValue = str | int | float | bool | None

# Characters left unescaped by URI component encoding, besides ASCII
# letters, digits and "_.-~" which ``quote`` never escapes.
_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode *value* as a URI component (``/`` becomes ``%2F``)."""
    return quote(value, safe=_COMPONENT_SAFE)


def stringify(value: ParamValue | bool) -> str:
    """Render a parameter or query value as URL text.

    Booleans render as ``true``/``false``; integral floats drop the
    fractional part, so ``2.0`` renders as ``"2"``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(query: Mapping[str, QueryValue]) -> str:
    """Serialize *query* as ``key=value`` pairs joined by ``&``.

    Entries whose value is ``None`` are dropped.  Order follows the
    mapping's iteration order.
    """
    return "&".join(
        f"{encode_component(key)}={encode_component(stringify(value))}"
        for key, value in query.items()
        if value is not None
    )


def generate_route(
    pattern: str,
    params: Mapping[str, ParamValue | None] | None = None,
    query: Mapping[str, QueryValue] | None = None,
) -> str:
    """Generate a URL by substituting the parameter segments of *pattern*.

    Literal segments are copied unchanged.  Parameter values are
    stringified and percent-encoded, so a value containing ``/`` never
    introduces an extra segment.  ``0`` and ``""`` are valid values.

    Raises ``MissingParameter`` for the first parameter segment, left to
    right, whose name is absent from *params* or mapped to ``None``.
    """
    if has_params(pattern):
        url = _substitute(pattern, params or {})
    else:
        url = pattern

    if query:
        qs = build_query(query)
        if qs:
            url = f"{url}{QUERY_DELIMITER}{qs}"

    return url


def _substitute(pattern: str, params: Mapping[str, ParamValue | None]) -> str:
    parts: list[str] = []
    for seg in parse_pattern(pattern):
        if not seg.is_param:
            parts.append(seg.value)
            continue
        name = seg.param_name or ""
        value = params.get(name)
        if value is None:
            raise MissingParameter(name=name, pattern=pattern)
        parts.append(encode_component(stringify(value)))
    return SEPARATOR.join(parts)
