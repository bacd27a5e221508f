"""
slugify-advanced: configurable, locale-aware slug generation.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    slugify-advanced "Crème brûlée" --separator _

Library Usage:
    from slugify_advanced import slugify

    slugify("für Straße")  # "fuer-strasse"
    slugify("The quick brown fox", remove_stop_words=True, max_length=12)
"""

from .config import ConfigError, SlugifyConfig, build_config
from .constants import DEFAULT_STOP_WORDS, LOCALE_MAPPINGS
from .exceptions import InvalidArgumentError
from .helpers import escape_pattern, preserve_case
from .slugify import slugify

__version__ = "1.0.1"

__all__ = [
    # Core functionality
    "slugify",
    # Configuration
    "SlugifyConfig",
    "build_config",
    "DEFAULT_STOP_WORDS",
    "LOCALE_MAPPINGS",
    # Utilities
    "escape_pattern",
    "preserve_case",
    # Exceptions
    "ConfigError",
    "InvalidArgumentError",
    # Version
    "__version__",
]
