"""Route tree definition and flattening.

A route tree is a nested mapping of names to patterns, defined once at
import time and shared between the code that generates URLs and the code
that matches them::

    routes = define_routes({
        "home": "/",
        "blog": {
            "root": "/blog",
            "post": "/blog/:slug",
        },
    })

    routes.blog.post             # "/blog/:slug"
    routes["blog"]["root"]       # "/blog"
    flatten_routes(routes)       # {"home": "/", "blog.root": "/blog", "blog.post": "/blog/:slug"}
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from routemap.errors import ConfigurationError

logger = logging.getLogger("routemap.tree")

type RouteNode = str | RouteTree


class RouteTree(Mapping[str, RouteNode]):
    """Immutable nested mapping of route names to patterns.

    Attributes:
        _data: Child name -> pattern string or nested ``RouteTree``.
        _path: Dotted key of this subtree (``""`` for the root).

    Supports item access and attribute access.  Assignment and deletion
    raise ``TypeError``.  Iteration follows definition order.
    """

    _data: dict[str, RouteNode]
    _path: str

    __slots__ = ("_data", "_path")

    def __init__(self, data: Mapping[str, RouteNode], path: str = "") -> None:
        object.__setattr__(self, "_data", dict(data))
        object.__setattr__(self, "_path", path)

    def __getitem__(self, key: str) -> RouteNode:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> RouteNode:
        data: dict[str, RouteNode] = object.__getattribute__(self, "_data")
        try:
            return data[name]
        except KeyError:
            where = object.__getattribute__(self, "_path") or "<root>"
            msg = f"route tree {where!r} has no route {name!r}"
            raise AttributeError(msg) from None

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"RouteTree is immutable; cannot set {name!r}"
        raise TypeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"RouteTree is immutable; cannot delete {name!r}"
        raise TypeError(msg)

    def __setitem__(self, key: str, value: Any) -> None:
        msg = f"RouteTree is immutable; cannot set {key!r}"
        raise TypeError(msg)

    def __delitem__(self, key: str) -> None:
        msg = f"RouteTree is immutable; cannot delete {key!r}"
        raise TypeError(msg)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"RouteTree({{{items}}})"

    def patterns(self, separator: str = ".") -> Iterator[tuple[str, str]]:
        """Yield ``(dotted_key, pattern)`` for every leaf, depth first."""
        for key, value in self._data.items():
            if isinstance(value, RouteTree):
                for sub_key, pattern in value.patterns(separator):
                    yield f"{key}{separator}{sub_key}", pattern
            else:
                yield key, value


# Names that attribute access would resolve to a method instead of a route
_RESERVED_NAMES = frozenset(dir(RouteTree))


def define_routes(routes: Mapping[str, Any], separator: str = ".") -> RouteTree:
    """Validate and deep-freeze a nested mapping of route patterns.

    Keys must be non-empty strings without *separator*, must not start
    with ``_`` and must not shadow a ``RouteTree`` method (``items``,
    ``get``, ``patterns``...), so ``routes.<name>`` always returns the
    route.  Leaves must be pattern strings or nested mappings.  An
    existing ``RouteTree`` is returned unchanged once its keys pass the
    same checks for *separator*.

    Raises ``ConfigurationError`` naming the dotted key of the first
    invalid entry.
    """
    if isinstance(routes, RouteTree):
        _check_tree(routes, "", separator)
        return routes
    tree = _freeze(routes, "", separator)
    logger.debug("Defined route tree with %d patterns", sum(1 for _ in tree.patterns(separator)))
    return tree


def _check_key(key: Any, prefix: str, separator: str) -> str:
    """Validate a route name and return its dotted key."""
    if not isinstance(key, str) or not key:
        msg = f"Route names must be non-empty strings, got {key!r} under {prefix or '<root>'!r}"
        raise ConfigurationError(msg)
    if separator in key:
        msg = f"Route name {key!r} must not contain the key separator {separator!r}"
        raise ConfigurationError(msg)
    full_key = f"{prefix}{separator}{key}" if prefix else key
    if key.startswith("_") or key in _RESERVED_NAMES:
        msg = f"Route {full_key!r} is reserved; names must not start with '_' or shadow RouteTree attributes"
        raise ConfigurationError(msg)
    return full_key


def _check_tree(tree: RouteTree, prefix: str, separator: str) -> None:
    for key, value in tree.items():
        full_key = _check_key(key, prefix, separator)
        if isinstance(value, RouteTree):
            _check_tree(value, full_key, separator)


def _freeze(routes: Mapping[str, Any], prefix: str, separator: str) -> RouteTree:
    if not isinstance(routes, Mapping):
        where = prefix or "<root>"
        msg = f"Route tree {where!r} must be a mapping, got {type(routes).__name__}"
        raise ConfigurationError(msg)

    frozen: dict[str, RouteNode] = {}
    for key, value in routes.items():
        full_key = _check_key(key, prefix, separator)
        if isinstance(value, str):
            frozen[key] = value
        elif isinstance(value, Mapping):
            frozen[key] = _freeze(value, full_key, separator)
        else:
            msg = f"Route {full_key!r} must be a pattern string or a nested mapping, got {type(value).__name__}"
            raise ConfigurationError(msg)

    return RouteTree(frozen, prefix)


def flatten_routes(
    routes: Mapping[str, Any],
    prefix: str = "",
    separator: str = ".",
) -> dict[str, str]:
    """Flatten a nested route tree into ``{"dotted.key": pattern}``.

    Keys appear in definition order, depth first.  Values that are neither
    strings nor mappings are skipped.

    Example::

        flatten_routes({"home": "/", "blog": {"post": "/blog/:slug"}})
        # -> {"home": "/", "blog.post": "/blog/:slug"}
    """
    result: dict[str, str] = {}
    for key, value in routes.items():
        full_key = f"{prefix}{separator}{key}" if prefix else key
        if isinstance(value, str):
            result[full_key] = value
        elif isinstance(value, Mapping):
            result.update(flatten_routes(value, full_key, separator))
    return result
