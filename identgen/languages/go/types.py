"""
Go-specific type name resolution.

Spells primitive kinds, slices and pointers the way generated Go code
expects them.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...core.config import ConfigError
from ...core.resolver import TypeResolver, unsupported
from ...core.schema import DataType, Kind

# Markers accepted for values of unknown type
GO_UNKNOWN_TYPES = frozenset({"interface{}", "any"})

GO_PRIMITIVE_NAMES: Dict[Kind, str] = {
    Kind.BOOLEAN: "bool",
    Kind.INT32: "int32",
    Kind.INT64: "int64",
    Kind.UINT32: "uint32",
    Kind.UINT64: "uint64",
    Kind.FLOAT32: "float32",
    Kind.FLOAT64: "float64",
    Kind.STRING: "string",
}


@dataclass(frozen=True)
class GoTypeConfig:
    """Configuration for Go type naming."""

    # Type of values of any kind; "any" needs Go 1.18+
    unknown_type: str = "interface{}"

    def __post_init__(self):
        if self.unknown_type not in GO_UNKNOWN_TYPES:
            raise ConfigError(
                f"Invalid unknown_type: {self.unknown_type!r} "
                f"(expected one of {', '.join(sorted(GO_UNKNOWN_TYPES))})"
            )

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]]) -> "GoTypeConfig":
        """
        Build a config from a dict of options.

        Raises:
            ConfigError: If an option is unknown or invalid
        """
        options = dict(options or {})
        known = set(cls.__dataclass_fields__)
        unknown = set(options) - known
        if unknown:
            raise ConfigError(f"Unknown Go type option(s): {', '.join(sorted(unknown))}")
        return cls(**options)


class GoTypeResolver(TypeResolver):
    """Resolves type descriptors to Go type names."""

    array_prefix = "[]"
    pointer_prefix = "*"

    def __init__(self, config: Optional[GoTypeConfig] = None):
        """Initialize with type configuration."""
        self.config = config or GoTypeConfig()

    def primitive_name(self, kind: Kind) -> str:
        if kind == Kind.ANY:
            return self.config.unknown_type
        name = GO_PRIMITIVE_NAMES.get(kind)
        if name is None:
            unsupported(kind, "primitive_name")
        return name

    def array_of(self, element_name: str) -> str:
        return self.array_prefix + element_name

    def reference_to(self, type_name: str) -> str:
        return self.pointer_prefix + type_name


def create_modern_go_type_config() -> GoTypeConfig:
    """Create type config using modern Go features (1.18+)."""
    return GoTypeConfig(unknown_type="any")


_default_resolver = GoTypeResolver()


def go_native_type(dt: DataType) -> str:
    """Return the Go built-in type from which instances of ``dt`` can be initialized."""
    return _default_resolver.native_type_name(dt)


def go_type_name(dt: DataType) -> str:
    """Return the Go type name for a data type."""
    return _default_resolver.type_name(dt)


def go_type_ref(dt: DataType) -> str:
    """Return the Go code that refers to the Go type matching ``dt``."""
    return _default_resolver.type_reference(dt)
