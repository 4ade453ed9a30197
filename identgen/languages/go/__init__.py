"""
Go target language.

Combines the Go naming dictionaries with the Go type resolver.
"""

from typing import Any, Dict

from ...core.config import NamingConfig
from ...core.language import TargetLanguage
from ...core.resolver import TypeResolver
from .naming import (
    GO_INITIALISMS,
    GO_RESERVED_WORDS,
    create_go_normalizer,
    go_naming_config,
    goify,
)
from .types import (
    GoTypeConfig,
    GoTypeResolver,
    create_modern_go_type_config,
    go_native_type,
    go_type_name,
    go_type_ref,
)

__all__ = [
    "GoLanguage",
    "GoTypeConfig",
    "GoTypeResolver",
    "GO_INITIALISMS",
    "GO_RESERVED_WORDS",
    "create_go_normalizer",
    "create_modern_go_type_config",
    "create_modern_go_language",
    "go_naming_config",
    "go_native_type",
    "go_type_name",
    "go_type_ref",
    "goify",
]


class GoLanguage(TargetLanguage):
    """Go identifiers and type names."""

    @property
    def language_name(self) -> str:
        return "go"

    def default_naming_config(self) -> NamingConfig:
        return go_naming_config()

    def create_type_resolver(self, options: Dict[str, Any]) -> TypeResolver:
        return GoTypeResolver(GoTypeConfig.from_options(options))


def create_modern_go_language(**options) -> GoLanguage:
    """
    Create a Go target using modern Go features.

    Features:
    - Uses 'any' instead of interface{}
    """
    options.setdefault("unknown_type", create_modern_go_type_config().unknown_type)
    return GoLanguage(options)
