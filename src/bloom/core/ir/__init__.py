"""
Bloom Intermediate Representation (IR) types.

All IR types are immutable pydantic models and are re-exported from this
package.
"""

from .primitives import PrimitiveKind
from .structs import FieldSpec, StructSpec
from .types import IdentifierType, PrimitiveType, TypeRef

__all__ = [
    "PrimitiveKind",
    "PrimitiveType",
    "IdentifierType",
    "TypeRef",
    "FieldSpec",
    "StructSpec",
]
