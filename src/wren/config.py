"""Composer configuration.

ComposerConfig is a frozen dataclass, immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from wren.errors import ConfigurationError

# Templates shipped with the package (setup layout)
DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


@dataclass(frozen=True, slots=True)
class ComposerConfig:
    """Page composer configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ComposerConfig(strict_paths=True, fetch_timeout=2.0)
    """

    # Setup bundle templates
    template_dir: str | Path = DEFAULT_TEMPLATE_DIR
    setup_head_template: str = "AuthLayout.head.html"
    setup_body_template: str = "AuthLayout.body.html"

    # Duplicate full paths raise DuplicatePagePath instead of last-wins
    strict_paths: bool = False

    # Upper bound for one composition, in seconds (None = no limit)
    fetch_timeout: float | None = None

    # Logging
    log_level: str = "warning"

    def validate(self) -> None:
        """Check field values, raising ``ConfigurationError`` on the first bad one."""
        if self.fetch_timeout is not None and self.fetch_timeout <= 0:
            msg = f"fetch_timeout must be positive, got {self.fetch_timeout!r}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in _LOG_LEVELS:
            msg = f"Unknown log_level {self.log_level!r}"
            raise ConfigurationError(msg)
        if not self.setup_head_template or not self.setup_body_template:
            msg = "Setup template names must not be empty"
            raise ConfigurationError(msg)

    @property
    def logging_level(self) -> int:
        """The ``logging`` module constant for ``log_level``."""
        return logging.getLevelNamesMapping()[self.log_level.upper()]
