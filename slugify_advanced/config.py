"""Configuration loading and management."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlugifyConfig:
    """Options controlling how `slugify` builds a slug.

    Attributes:
        separator: String joining words in the output. May be empty or longer
            than one character.
        lowercase: Whether to lowercase the result.
        custom_replacements: ``(pattern, replacement)`` pairs applied before any
            other processing, longest pattern first.
        locale: Whether to apply the built-in transliteration table.
        strict: When True, underscores are converted to the separator instead
            of being kept.
        max_length: Maximum slug length. ``None`` (or a non-positive value)
            disables truncation.
        remove_stop_words: ``True`` for the default English list, or the words
            to remove.

    Examples:
        SlugifyConfig(separator="_", max_length=32)
    """

    separator: str = "-"
    lowercase: bool = True
    custom_replacements: tuple[tuple[str, str], ...] = ()
    locale: bool = True
    strict: bool = False
    max_length: int | None = None
    remove_stop_words: bool | tuple[str, ...] = False


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Attributes:
        args: Arguments provided to the underlying `ValueError`.

    Examples:
        raise ConfigError("`separator` must be a string")
    """


# camelCase spellings accepted alongside the field names
OPTION_ALIASES = {
    "customReplacements": "custom_replacements",
    "maxLength": "max_length",
    "removeStopWords": "remove_stop_words",
}

_FIELD_NAMES = frozenset(field.name for field in fields(SlugifyConfig))


def load_config(source: SlugifyConfig | Mapping[str, object] | None = None) -> SlugifyConfig:
    """Build a `SlugifyConfig` from a config object or a mapping of options.

    Mapping keys may use either the field names or their camelCase aliases.
    Unrecognized keys are ignored.

    Args:
        source: An existing configuration, a mapping of option names to values,
            or None for the defaults.

    Returns:
        SlugifyConfig: Configuration holding the supplied values.

    Raises:
        ConfigError: If `source` is neither a `SlugifyConfig`, a mapping, nor None.

    Examples:
        load_config({"separator": "_", "maxLength": 20})
    """
    if source is None:
        return SlugifyConfig()
    if isinstance(source, SlugifyConfig):
        return source
    if not isinstance(source, Mapping):
        raise ConfigError(f"Invalid slugify options: {type(source).__name__}")
    return apply_overrides(SlugifyConfig(), **source)


def apply_overrides(config: SlugifyConfig, **overrides: object) -> SlugifyConfig:
    """Apply override values to a `SlugifyConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by field name or camelCase alias.
            Unknown names are ignored.

    Returns:
        SlugifyConfig: New configuration with the provided overrides applied.
        The original configuration is returned when no changes are supplied.

    Examples:
        updated = apply_overrides(config, separator="_", strict=True)
    """
    changes = {}
    for key, value in overrides.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            logger.debug("Ignoring unrecognized slugify option %r", key)
            continue
        changes[name] = value
    if not changes:
        return config
    return replace(config, **changes)


def normalize_config(config: SlugifyConfig) -> SlugifyConfig:
    """Coerce option values into their immutable canonical forms.

    Replacement mappings become ordered pair tuples, stop-word lists become
    tuples, and empty patterns or words are dropped. Values of the wrong type
    are passed through untouched for `validate_config` to report.
    """
    replacements = config.custom_replacements
    if isinstance(replacements, Mapping):
        replacements = tuple(replacements.items())
    elif replacements is None:
        replacements = ()
    elif isinstance(replacements, Iterable) and not isinstance(replacements, str):
        try:
            replacements = tuple(_as_pair(pair) for pair in replacements)
        except TypeError as error:
            raise ConfigError("`custom_replacements` entries must be pairs of strings") from error
    if isinstance(replacements, tuple):
        replacements = tuple(pair for pair in replacements if not _is_empty_pattern(pair))

    stop_words = config.remove_stop_words
    if stop_words is None:
        stop_words = False
    elif isinstance(stop_words, str):
        stop_words = (stop_words,)
    elif not isinstance(stop_words, bool) and isinstance(stop_words, Iterable):
        stop_words = tuple(word for word in stop_words if word != "")

    max_length = config.max_length
    if isinstance(max_length, int) and not isinstance(max_length, bool) and max_length <= 0:
        max_length = None

    return replace(
        config,
        custom_replacements=replacements,
        remove_stop_words=stop_words,
        max_length=max_length,
    )


def validate_config(config: SlugifyConfig) -> None:
    """Validate a `SlugifyConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If the separator is not a string, a flag is not a boolean,
            `max_length` is not an integer, or a replacement pair or stop word
            is not made of strings.

    Examples:
        validate_config(SlugifyConfig(separator="_"))
    """
    config = normalize_config(config)

    if not isinstance(config.separator, str):
        raise ConfigError("`separator` must be a string")

    _ensure_booleans(
        {
            "lowercase": config.lowercase,
            "locale": config.locale,
            "strict": config.strict,
        }
    )

    if config.max_length is not None:
        if isinstance(config.max_length, bool) or not isinstance(config.max_length, int):
            raise ConfigError("`max_length` must be an integer")

    if not isinstance(config.custom_replacements, tuple):
        raise ConfigError("`custom_replacements` must be a mapping or a list of pairs")
    for pair in config.custom_replacements:
        if len(pair) != 2 or not all(isinstance(part, str) for part in pair):
            raise ConfigError("`custom_replacements` entries must be pairs of strings")

    stop_words = config.remove_stop_words
    if not isinstance(stop_words, bool):
        if not isinstance(stop_words, tuple) or not all(isinstance(word, str) for word in stop_words):
            raise ConfigError("`remove_stop_words` must be a boolean or a list of strings")


def build_config(
    source: SlugifyConfig | Mapping[str, object] | None = None, **overrides: object
) -> SlugifyConfig:
    """Load, override, normalize, and validate configuration.

    Args:
        source: Base configuration or mapping of options; None uses defaults.
        overrides: Override values keyed by option name.

    Returns:
        SlugifyConfig: Validated configuration ready for the pipeline.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config({"separator": "_"}, strict=True)
    """
    config = load_config(source)
    config = apply_overrides(config, **overrides)
    config = normalize_config(config)
    validate_config(config)
    logger.debug("Effective slugify configuration: %r", config)
    return config


def _as_pair(pair: object) -> tuple[object, ...]:
    if isinstance(pair, str):
        raise TypeError(pair)
    return tuple(pair)


def _is_empty_pattern(pair: object) -> bool:
    return isinstance(pair, tuple) and len(pair) == 2 and pair[0] == ""


def _ensure_booleans(values: dict[str, object]) -> None:
    for key, value in values.items():
        if not isinstance(value, bool):
            raise ConfigError(f"`{key}` must be a boolean")
