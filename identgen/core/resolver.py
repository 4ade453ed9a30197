"""
Type name resolution.

Maps type descriptors to the type names of a target language. The recursion
over the descriptor algebra lives here; subclasses only provide the
language's spelling of primitives, arrays and references.
"""

from abc import ABC, abstractmethod
from typing import NoReturn

from ..logging_config import get_logger
from .schema import (
    ArrayOf,
    CompositeOf,
    DataType,
    InvariantViolation,
    Kind,
    Primitive,
    describe,
    is_object,
)

logger = get_logger(__name__)


def unsupported(dt: object, where: str) -> NoReturn:
    """Log and raise for a descriptor outside the supported algebra."""
    logger.error("identgen bug: unknown type %s in %s", describe(dt), where)
    raise InvariantViolation(f"identgen bug: unknown type {describe(dt)} in {where}")


class TypeResolver(ABC):
    """Abstract base class for language type resolvers."""

    @abstractmethod
    def primitive_name(self, kind: Kind) -> str:
        """Return the built-in type name of a primitive kind."""
        pass

    @abstractmethod
    def array_of(self, element_name: str) -> str:
        """Return the array type spelling for an element type name."""
        pass

    @abstractmethod
    def reference_to(self, type_name: str) -> str:
        """Return the reference (pointer) spelling of a type name."""
        pass

    def native_type_name(self, dt: DataType) -> str:
        """
        Return the built-in type from which instances of ``dt`` can be initialized.

        Composites are unwrapped, arrays recurse into their element.
        """
        if isinstance(dt, Primitive):
            return self.primitive_name(dt.kind)
        if isinstance(dt, ArrayOf):
            return self.array_of(self.native_type_name(dt.element))
        if isinstance(dt, CompositeOf):
            return self.native_type_name(dt.inner)
        unsupported(dt, "native_type_name")

    def type_name(self, dt: DataType) -> str:
        """
        Return the type name for ``dt``.

        Array elements are spelled as references. Only primitives and arrays
        are accepted; anything else is an invariant violation.
        """
        if isinstance(dt, Primitive):
            return self.native_type_name(dt)
        if isinstance(dt, ArrayOf):
            return self.array_of(self.type_reference(dt.element))
        unsupported(dt, "type_name")

    def type_reference(self, dt: DataType) -> str:
        """Return the code that refers to the type matching ``dt``."""
        name = self.type_name(dt)
        if is_object(dt):
            return self.reference_to(name)
        return name
