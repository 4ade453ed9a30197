"""
Target language registry.

Maps language names and aliases to target language classes and builds
configured instances of them.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import ConfigError, load_config
from .core.language import TargetLanguage
from .logging_config import get_logger

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class LanguageRegistry:
    """Registry for managing available target languages."""

    def __init__(self):
        """Initialize empty registry."""
        self._languages: Dict[str, Type[TargetLanguage]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        language_class: Type[TargetLanguage],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a target language.

        Args:
            language: Primary language name (e.g., 'go')
            language_class: Class implementing TargetLanguage
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If the class is invalid or an alias conflicts
        """
        if not (
            isinstance(language_class, type) and issubclass(language_class, TargetLanguage)
        ):
            raise RegistryError("Language class must inherit from TargetLanguage")

        language_key = language.lower()

        if language_key in self._languages and not replace:
            logger.debug("Language already registered, skipping: %s", language_key)
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != language_key]
        if not replace:
            for alias_key in alias_keys:
                if alias_key in self._languages:
                    raise RegistryError(
                        f"Alias '{alias_key}' conflicts with existing primary language"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                    raise RegistryError(
                        f"Alias '{alias_key}' already points to '{self._aliases[alias_key]}'"
                    )

        self._languages[language_key] = language_class
        for alias_key in alias_keys:
            self._aliases[alias_key] = language_key

        logger.debug(
            "Registered language %s (%s) aliases=%s",
            language_key,
            language_class.__name__,
            aliases or [],
        )

    def unregister(self, language: str):
        """Unregister a language and its aliases."""
        language_key = language.lower()
        self._languages.pop(language_key, None)

        for alias in [a for a, target in self._aliases.items() if target == language_key]:
            del self._aliases[alias]

    def resolve_name(self, language: str) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()
        if language_key in self._languages:
            return language_key
        if language_key in self._aliases:
            return self._aliases[language_key]

        raise RegistryError(
            f"No target registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_language_class(self, language: str) -> Type[TargetLanguage]:
        """Get the target language class for a name or alias."""
        return self._languages[self.resolve_name(language)]

    def create_language(
        self,
        language: str,
        config: Optional[Union[Dict[str, Any], str, Path]] = None,
    ) -> TargetLanguage:
        """
        Create a configured target language instance.

        Args:
            language: Language name or alias
            config: Option overrides as a dict or a JSON file path

        Returns:
            Target language instance

        Raises:
            RegistryError: If the language is unknown
            ConfigError: If the configuration is invalid
        """
        language_class = self.get_language_class(language)

        if isinstance(config, (str, Path)):
            options = load_config(config_file=config)
        elif isinstance(config, dict) or config is None:
            options = load_config(custom_config=config)
        else:
            raise ConfigError(f"Invalid config type: {type(config)}")

        instance = language_class(options)
        # Fail on bad options now rather than on first use
        instance.normalizer
        instance.resolver
        return instance

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._languages)

    def get_aliases_for_language(self, language: str) -> List[str]:
        """Get all aliases for a specific language."""
        language_key = self.resolve_name(language)
        return sorted(a for a, target in self._aliases.items() if target == language_key)

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is registered."""
        language_key = language.lower()
        return language_key in self._languages or language_key in self._aliases


# Global registry instance - created once
_global_registry: Optional[LanguageRegistry] = None


def get_registry() -> LanguageRegistry:
    """Get the global language registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = LanguageRegistry()
        _auto_register_languages(_global_registry)
    return _global_registry


def _auto_register_languages(registry: LanguageRegistry):
    """Register the languages shipped with identgen."""
    from .languages.go import GoLanguage

    registry.register("go", GoLanguage, aliases=["golang"])


def get_language(
    language: str = "go",
    config: Optional[Union[Dict[str, Any], str, Path]] = None,
) -> TargetLanguage:
    """Get a configured target language from the global registry."""
    return get_registry().create_language(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)
