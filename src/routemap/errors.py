"""Routemap exception hierarchy.

Shared across the generator, matcher, route tree and CLI so every module
raises and catches the same types.  A path that does not match a pattern
is *not* an error: ``match_route`` returns ``None`` for that.
"""


class RoutemapError(Exception):
    """Base for all routemap-specific errors."""


class ConfigurationError(RoutemapError):
    """Raised when a route tree or config is invalid.

    Typically raised by ``define_routes()`` at import time.
    """


class MissingParameter(RoutemapError, LookupError):  # noqa: N818 — mirrors the failure it names
    """A parameter segment has no value in the supplied mapping.

    Never recovered automatically and never defaulted to an empty string.
    """

    def __init__(self, name: str, pattern: str) -> None:
        super().__init__(name, pattern)
        self.name = name
        self.pattern = pattern

    def __str__(self) -> str:
        return f'Missing required route parameter: "{self.name}" for route "{self.pattern}"'


class InvalidEncoding(RoutemapError, ValueError):
    """A path segment bound to a parameter is not valid percent-encoded UTF-8."""

    def __init__(self, segment: str, pattern: str) -> None:
        super().__init__(segment, pattern)
        self.segment = segment
        self.pattern = pattern

    def __str__(self) -> str:
        return f"Malformed percent-encoding in segment {self.segment!r} for route {self.pattern!r}"
