"""Routemap configuration.

RoutemapConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

import logging
from dataclasses import dataclass

from routemap.errors import ConfigurationError

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


@dataclass(frozen=True, slots=True)
class RoutemapConfig:
    """Settings for flattening and the ``routemap`` CLI.

    All fields have sensible defaults. Override what you need::

        config = RoutemapConfig(key_separator="/", log_level="debug")
    """

    # Joins nested route names in flattened keys ("blog.post")
    key_separator: str = "."

    # CLI
    log_level: str = "warning"
    column_width: int = 25  # Minimum width of the KEY column in `routemap routes`

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any field is out of range."""
        if not self.key_separator:
            msg = "key_separator must be a non-empty string"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"Unknown log_level {self.log_level!r}. Expected one of: {', '.join(LOG_LEVELS)}"
            raise ConfigurationError(msg)
        if self.column_width < 1:
            msg = f"column_width must be positive, got {self.column_width}"
            raise ConfigurationError(msg)

    @property
    def logging_level(self) -> int:
        """The ``logging`` module level for ``log_level``."""
        return LOG_LEVELS[self.log_level.lower()]
