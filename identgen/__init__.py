"""
identgen: identifiers and type names for generated source code.

Turns names from a schema or design description into valid identifiers of
a target language and maps type descriptors to that language's type names.
"""

from .core import (
    ArrayOf,
    CompositeOf,
    ConfigError,
    IdentifierNormalizer,
    InvariantViolation,
    Kind,
    NamingConfig,
    Primitive,
    TargetLanguage,
    TypeResolver,
)
from .languages.go import GoLanguage, goify
from .registry import RegistryError, get_language, list_supported_languages

__version__ = "0.1.0"

__all__ = [
    "ArrayOf",
    "CompositeOf",
    "ConfigError",
    "GoLanguage",
    "IdentifierNormalizer",
    "InvariantViolation",
    "Kind",
    "NamingConfig",
    "Primitive",
    "RegistryError",
    "TargetLanguage",
    "TypeResolver",
    "get_language",
    "goify",
    "list_supported_languages",
]
