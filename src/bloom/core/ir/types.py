"""
Type references for Bloom IR.

A field's type is either one of the built-in primitives or the name of a
user-defined struct. Names are kept as written: whether they resolve to a
struct is decided downstream, so forward and unresolvable references are
both valid here.
"""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..lexer import is_identifier
from .primitives import PrimitiveKind


class PrimitiveType(BaseModel):
    """
    A built-in scalar type.

    Examples:
        - u32: PrimitiveType(primitive=PrimitiveKind.U32)
        - bool: PrimitiveType(primitive=PrimitiveKind.BOOL)
    """

    primitive: PrimitiveKind

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.primitive.value


class IdentifierType(BaseModel):
    """
    A reference to a struct by name.

    Examples:
        - Vector3: IdentifierType(name="Vector3")
    """

    name: str = Field(description="Referenced struct name, unresolved")

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not is_identifier(v):
            raise ValueError(f"Type name '{v}' is not a valid identifier")
        if PrimitiveKind.from_label(v) is not None:
            raise ValueError(f"Type name '{v}' is a primitive; use PrimitiveType")
        return v

    def __str__(self) -> str:
        return self.name


TypeRef = Annotated[
    Union[PrimitiveType, IdentifierType],
    Field(description="A field type: a primitive or a struct reference by name"),
]
