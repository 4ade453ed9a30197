"""
Go-specific naming utilities.

Handles Go initialisms, reserved words and the package names used by
generated code.
"""

from ...core.config import NamingConfig
from ...core.naming import IdentifierNormalizer


# Common words that keep their case in Go identifiers
GO_INITIALISMS = frozenset(
    {
        "API",
        "ASCII",
        "CPU",
        "CSS",
        "DNS",
        "EOF",
        "GUID",
        "HTML",
        "HTTP",
        "HTTPS",
        "ID",
        "IP",
        "JMES",
        "JSON",
        "JWT",
        "LHS",
        "OK",
        "QPS",
        "RAM",
        "RHS",
        "RPC",
        "SLA",
        "SMTP",
        "SQL",
        "SSH",
        "TCP",
        "TLS",
        "TTL",
        "UDP",
        "UI",
        "UID",
        "UUID",
        "URI",
        "URL",
        "UTF8",
        "VM",
        "XML",
        "XSRF",
        "XSS",
    }
)

# Go builtin types that generated identifiers must not shadow
GO_BUILTIN_TYPES = frozenset(
    {
        "byte",
        "complex128",
        "complex64",
        "float32",
        "float64",
        "int",
        "int16",
        "int32",
        "int64",
        "int8",
        "rune",
        "string",
        "uint16",
        "uint32",
        "uint64",
        "uint8",
    }
)

# Go reserved words
GO_RESERVED_WORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

# Standard library packages imported by generated code
GO_PACKAGE_NAMES = frozenset(
    {
        "fmt",
        "http",
        "json",
        "os",
        "url",
        "time",
    }
)


def go_naming_config(include_packages: bool = False) -> NamingConfig:
    """
    Build the default naming configuration for Go.

    Args:
        include_packages: Also escape the names of the standard packages
            generated code imports (``http``, ``json``...). Only needed when
            identifiers share a scope with those imports.
    """
    reserved = GO_BUILTIN_TYPES | GO_RESERVED_WORDS
    if include_packages:
        reserved = reserved | GO_PACKAGE_NAMES
    return NamingConfig(
        initialisms=GO_INITIALISMS,
        reserved_words=reserved,
    )


_default_normalizer = None


def create_go_normalizer(include_packages: bool = False) -> IdentifierNormalizer:
    """Create an identifier normalizer configured for Go."""
    return IdentifierNormalizer(go_naming_config(include_packages))


def get_default_normalizer() -> IdentifierNormalizer:
    """Get the shared Go normalizer instance."""
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = create_go_normalizer()
    return _default_normalizer


def goify(name: str, first_upper: bool = True) -> str:
    """
    Make a valid Go identifier out of any string.

    Non letter and non digit characters are removed and the result is
    CamelCase; ``first_upper`` selects between an exported (``FooBar``) and
    an unexported (``fooBar``) identifier.

    >>> goify("user_id")
    'UserID'
    >>> goify("map", False)
    'map_'
    """
    return get_default_normalizer().normalize(name, first_upper)
