"""
Core identifier and type naming components.

Provides the language-agnostic normalizer, resolver and configuration used
by every target language.
"""

from .config import ConfigError, NamingConfig, load_config, load_config_file
from .language import TargetLanguage
from .naming import IdentifierNormalizer
from .resolver import TypeResolver
from .schema import (
    ArrayOf,
    CompositeOf,
    DataType,
    InvariantViolation,
    Kind,
    Primitive,
    is_object,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Naming
    "IdentifierNormalizer",
    "NamingConfig",
    # Type descriptors and resolution
    "ArrayOf",
    "CompositeOf",
    "DataType",
    "InvariantViolation",
    "Kind",
    "Primitive",
    "TypeResolver",
    "is_object",
    # Target languages
    "TargetLanguage",
    # Configuration system
    "ConfigError",
    "load_config",
    "load_config_file",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
