"""
Base interface for target languages.

A target language bundles the naming dictionaries and the type syntax a code
emitter needs to produce identifiers and type names for that language.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..logging_config import get_logger
from .config import NAMING_KEYS, NamingConfig
from .naming import IdentifierNormalizer
from .resolver import TypeResolver
from .schema import DataType

logger = get_logger(__name__)


class TargetLanguage(ABC):
    """Abstract base class for all target languages."""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """
        Initialize with optional configuration overrides.

        Args:
            options: Naming overrides (see ``NamingConfig.with_overrides``)
                and language specific type options
        """
        self.options = dict(options or {})
        self._normalizer: Optional[IdentifierNormalizer] = None
        self._resolver: Optional[TypeResolver] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @abstractmethod
    def default_naming_config(self) -> NamingConfig:
        """Return the language's built-in initialisms and reserved words."""
        pass

    @abstractmethod
    def create_type_resolver(self, options: Dict[str, Any]) -> TypeResolver:
        """
        Create the type resolver for this language.

        Args:
            options: The options that are not naming options
        """
        pass

    @property
    def naming_options(self) -> Dict[str, Any]:
        return {k: v for k, v in self.options.items() if k in NAMING_KEYS}

    @property
    def type_options(self) -> Dict[str, Any]:
        return {k: v for k, v in self.options.items() if k not in NAMING_KEYS}

    @property
    def normalizer(self) -> IdentifierNormalizer:
        """Get the identifier normalizer, built on first use."""
        if self._normalizer is None:
            config = self.default_naming_config().with_overrides(self.naming_options)
            self._normalizer = IdentifierNormalizer(config)
            logger.debug(
                "%s normalizer ready (%d initialisms, %d reserved words)",
                self.language_name,
                len(config.initialisms),
                len(config.reserved_words),
            )
        return self._normalizer

    @property
    def resolver(self) -> TypeResolver:
        """Get the type resolver, built on first use."""
        if self._resolver is None:
            self._resolver = self.create_type_resolver(self.type_options)
        return self._resolver

    def identifier(self, name: str, capitalize_first: bool = True) -> str:
        """Make a valid identifier out of ``name``."""
        return self.normalizer.normalize(name, capitalize_first)

    def native_type_name(self, dt: DataType) -> str:
        return self.resolver.native_type_name(dt)

    def type_name(self, dt: DataType) -> str:
        return self.resolver.type_name(dt)

    def type_reference(self, dt: DataType) -> str:
        return self.resolver.type_reference(dt)
