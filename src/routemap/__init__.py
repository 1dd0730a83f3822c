"""routemap — named URL patterns shared by URL generation and path matching.

Define every route once, then build URLs from it and match incoming
paths against it.  Stateless pure functions, safe to call from any
thread.

Basic usage::

    from routemap import define_routes, generate_route, match_route

    routes = define_routes({
        "home": "/",
        "blog": {"post": "/blog/posts/:id"},
    })

    generate_route(routes.blog.post, {"id": 42}, {"tab": "comments"})
    # -> "/blog/posts/42?tab=comments"

    match_route(routes.blog.post, "/blog/posts/42")
    # -> {"id": "42"}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "InvalidEncoding",
    "MissingParameter",
    "RouteTree",
    "RoutemapConfig",
    "RoutemapError",
    "Segment",
    "define_routes",
    "flatten_routes",
    "generate_route",
    "match_route",
    "param_names",
    "parse_pattern",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routemap`` fast while providing a clean top-level API.
    """
    if name == "generate_route":
        from routemap.generate import generate_route

        return generate_route

    if name == "match_route":
        from routemap.match import match_route

        return match_route

    if name in ("Segment", "param_names", "parse_pattern"):
        from routemap import patterns as _patterns

        return getattr(_patterns, name)

    if name in ("RouteTree", "define_routes", "flatten_routes"):
        from routemap import tree as _tree

        return getattr(_tree, name)

    if name == "RoutemapConfig":
        from routemap.config import RoutemapConfig

        return RoutemapConfig

    if name in ("RoutemapError", "ConfigurationError", "MissingParameter", "InvalidEncoding"):
        from routemap import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
