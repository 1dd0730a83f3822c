"""Pattern tokenization and parameter-name inference.

A pattern is a ``/``-separated template such as ``/users/:id/posts/:post_id``.
Each segment is either a literal, compared verbatim, or a parameter
segment, ``:`` followed by the parameter name.  The generator and the
matcher both tokenize through :func:`parse_pattern`, so they always agree
on which segments are parameters.
"""

from dataclasses import dataclass
from functools import lru_cache

PARAM_PREFIX = ":"
SEPARATOR = "/"
QUERY_DELIMITER = "?"


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a route pattern.

    Literal: ``users``  (is_param=False)
    Param:   ``:id``    (is_param=True, param_name="id")
    Empty:   ``""``     (leading, trailing or doubled slash; always literal)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@lru_cache(maxsize=512)
def parse_pattern(pattern: str) -> tuple[Segment, ...]:
    """Parse a route pattern into segments.

    Empty segments are kept, so the segment count of a pattern is the
    number of slashes plus one::

        "/"             -> (Segment(""), Segment(""))
        "/users/:id"    -> (Segment(""), Segment("users"), Segment(":id", True, "id"))
        "/users/"       -> (Segment(""), Segment("users"), Segment(""))
    """
    segments: list[Segment] = []
    for part in pattern.split(SEPARATOR):
        if part.startswith(PARAM_PREFIX):
            segments.append(Segment(value=part, is_param=True, param_name=part[len(PARAM_PREFIX) :]))
        else:
            segments.append(Segment(value=part))
    return tuple(segments)


def param_names(pattern: str) -> tuple[str, ...]:
    """Return the distinct parameter names of *pattern*, left to right.

    >>> param_names("/users/:user_id/posts/:post_id")
    ('user_id', 'post_id')
    >>> param_names("/login")
    ()
    """
    seen: dict[str, None] = {}
    for seg in parse_pattern(pattern):
        if seg.is_param and seg.param_name is not None:
            seen.setdefault(seg.param_name, None)
    return tuple(seen)


def has_params(pattern: str) -> bool:
    """True if *pattern* has at least one parameter segment."""
    return any(seg.is_param for seg in parse_pattern(pattern))


def split_path(pathname: str) -> list[str]:
    """Drop the query suffix of *pathname* and split it into segments.

    No trailing-slash normalization: ``/users/`` has three segments.
    """
    path, _, _ = pathname.partition(QUERY_DELIMITER)
    return path.split(SEPARATOR)
