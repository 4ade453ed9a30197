"""
Type descriptors consumed by the type name resolver.

The descriptor algebra is closed: a primitive kind, an array of another
descriptor, or a composite that transparently wraps another descriptor.
Maps, objects and user types are not modelled yet.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Kind(Enum):
    """Primitive kinds supported across all target languages."""

    BOOLEAN = "boolean"
    INT32 = "int32"
    INT64 = "int64"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    ANY = "any"


class InvariantViolation(Exception):
    """
    Raised when a descriptor outside the supported algebra reaches the resolver.

    It signals a bug in whatever built the descriptor, not bad user input,
    and is not a ``ValueError``.
    """

    pass


@dataclass(frozen=True)
class Primitive:
    """A primitive type such as ``int64`` or ``string``."""

    kind: Kind

    def __post_init__(self):
        """Accept the kind's string value as well as the enum member."""
        if not isinstance(self.kind, Kind):
            object.__setattr__(self, "kind", Kind(self.kind))


@dataclass(frozen=True)
class ArrayOf:
    """An array whose elements are described by ``element``."""

    element: "DataType"


@dataclass(frozen=True)
class CompositeOf:
    """A transparent wrapper, e.g. an attribute holding a type."""

    inner: "DataType"


DataType = Union[Primitive, ArrayOf, CompositeOf]

# Shared instances for the primitive kinds
Boolean = Primitive(Kind.BOOLEAN)
Int32 = Primitive(Kind.INT32)
Int64 = Primitive(Kind.INT64)
UInt32 = Primitive(Kind.UINT32)
UInt64 = Primitive(Kind.UINT64)
Float32 = Primitive(Kind.FLOAT32)
Float64 = Primitive(Kind.FLOAT64)
String = Primitive(Kind.STRING)
Any = Primitive(Kind.ANY)


def is_object(dt: DataType) -> bool:
    """
    Check whether a descriptor needs indirection to be passed by reference.

    None of the supported variants is object-like; object and user types
    will answer True once they exist.
    """
    if isinstance(dt, (Primitive, ArrayOf)):
        return False
    if isinstance(dt, CompositeOf):
        return is_object(dt.inner)
    return False


def describe(dt: DataType) -> str:
    """Render a descriptor as a short human readable string for messages."""
    if isinstance(dt, Primitive):
        return dt.kind.value
    if isinstance(dt, ArrayOf):
        return f"array<{describe(dt.element)}>"
    if isinstance(dt, CompositeOf):
        return f"composite<{describe(dt.inner)}>"
    return repr(dt)
