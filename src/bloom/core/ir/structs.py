"""
Struct definitions for Bloom IR.

This module contains the field and struct specifications produced by the
parser. Both are immutable once built.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from ..lexer import is_identifier
from .types import IdentifierType, TypeRef


class FieldSpec(BaseModel):
    """
    A single named, typed field of a struct.

    Attributes:
        name: Field identifier
        type: Primitive type or struct reference
    """

    name: str
    type: TypeRef

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not is_identifier(v):
            raise ValueError(f"Field name '{v}' is not a valid identifier")
        return v

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


class StructSpec(BaseModel):
    """
    A struct definition.

    Field order is kept exactly as written. Fields are held in a tuple, so a
    struct is hashable and cannot be changed after construction. Duplicate
    field names are allowed at this level.

    Examples:
        - struct Empty {}: StructSpec(name="Empty")
        - struct Pair { a: u8, b: Other }: StructSpec(name="Pair", fields=[...])
    """

    name: str
    fields: tuple[FieldSpec, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not is_identifier(v):
            raise ValueError(f"Struct name '{v}' is not a valid identifier")
        return v

    def __str__(self) -> str:
        if not self.fields:
            return f"struct {self.name} {{}}"
        body = ", ".join(str(f) for f in self.fields)
        return f"struct {self.name} {{ {body} }}"

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> FieldSpec | None:
        """Get the first field with the given name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @property
    def referenced_names(self) -> list[str]:
        """
        Names of struct types referenced by fields, in field order.

        Each name appears once. This is a syntactic listing; nothing is
        resolved.
        """
        names: list[str] = []
        for f in self.fields:
            if isinstance(f.type, IdentifierType) and f.type.name not in names:
                names.append(f.type.name)
        return names
