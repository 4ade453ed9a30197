"""
Configuration management for identifier normalization.

Holds the immutable dictionaries (initialisms, reserved words) a normalizer
works with, and loads caller overrides from dicts or JSON files.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Optional, Union

from ..logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


# Keys understood by NamingConfig.with_overrides
NAMING_KEYS = {
    "initialisms",
    "extra_initialisms",
    "reserved_words",
    "extra_reserved_words",
    "allow_unicode",
}


def _as_word_set(values: Iterable[str], key: str) -> FrozenSet[str]:
    if isinstance(values, str):
        raise ConfigError(f"'{key}' must be a list of strings, not a string")
    try:
        words = frozenset(values)
    except TypeError as e:
        raise ConfigError(f"'{key}' must be a list of strings: {e}") from e
    for word in words:
        if not isinstance(word, str) or not word:
            raise ConfigError(f"'{key}' contains an invalid entry: {word!r}")
    return words


@dataclass(frozen=True)
class NamingConfig:
    """
    Dictionaries used by the identifier normalizer.

    Attributes:
        initialisms: Acronyms kept as a single all-upper or all-lower unit.
            Stored uppercased per code point, as candidate words are.
        reserved_words: Exact identifiers that get a trailing underscore.
        allow_unicode: Accept any Unicode letter or decimal digit instead of
            ASCII letters and digits only.
    """

    initialisms: FrozenSet[str] = field(default_factory=frozenset)
    reserved_words: FrozenSet[str] = field(default_factory=frozenset)
    allow_unicode: bool = False

    def __post_init__(self):
        from .naming import upper_word

        initialisms = _as_word_set(self.initialisms, "initialisms")
        object.__setattr__(
            self, "initialisms", frozenset(upper_word(w) for w in initialisms)
        )
        object.__setattr__(
            self,
            "reserved_words",
            _as_word_set(self.reserved_words, "reserved_words"),
        )
        if not isinstance(self.allow_unicode, bool):
            raise ConfigError(
                f"'allow_unicode' must be a boolean, got {self.allow_unicode!r}"
            )

    def is_initialism(self, word: str) -> bool:
        """Check an already uppercased word against the initialisms."""
        return word in self.initialisms

    def is_reserved(self, name: str) -> bool:
        """Check whether a fully assembled identifier is reserved."""
        return name in self.reserved_words

    def with_overrides(self, overrides: Optional[Dict[str, Any]]) -> "NamingConfig":
        """
        Return a copy of this config with caller overrides applied.

        ``initialisms`` and ``reserved_words`` replace the current sets,
        ``extra_initialisms`` and ``extra_reserved_words`` extend them.

        Raises:
            ConfigError: If an override key is unknown or malformed
        """
        if not overrides:
            return self

        unknown = set(overrides) - NAMING_KEYS
        if unknown:
            raise ConfigError(f"Unknown naming option(s): {', '.join(sorted(unknown))}")

        initialisms = set(
            _as_word_set(overrides.get("initialisms", self.initialisms), "initialisms")
        )
        initialisms.update(
            _as_word_set(overrides.get("extra_initialisms", ()), "extra_initialisms")
        )

        reserved = set(
            _as_word_set(
                overrides.get("reserved_words", self.reserved_words), "reserved_words"
            )
        )
        reserved.update(
            _as_word_set(
                overrides.get("extra_reserved_words", ()), "extra_reserved_words"
            )
        )

        return NamingConfig(
            initialisms=frozenset(initialisms),
            reserved_words=frozenset(reserved),
            allow_unicode=overrides.get("allow_unicode", self.allow_unicode),
        )


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file.

    Args:
        config_path: Path to the JSON file

    Returns:
        The decoded JSON object

    Raises:
        ConfigError: If the file is missing, not JSON or not a JSON object
    """
    path = Path(config_path)
    logger.debug("Loading configuration file: %s", path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    if path.suffix.lower() != ".json":
        raise ConfigError(f"Configuration file must be JSON: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in configuration file %s: %s", path, e)
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
    except OSError as e:
        logger.error("Failed to read configuration file %s: %s", path, e)
        raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")

    logger.info("Loaded configuration from %s", path)
    return config


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    Merge options from a JSON file and a dict, the dict taking precedence.

    Args:
        custom_config: Configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged options
    """
    options: Dict[str, Any] = {}
    if config_file:
        options.update(load_config_file(config_file))
    if custom_config:
        options.update(custom_config)
    return options
