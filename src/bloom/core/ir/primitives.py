"""
Primitive type vocabulary for Bloom IR.

The closed set of fixed-width scalar kinds a field may be declared with.
Each member's value is its canonical lowercase label as written in source.
"""

from __future__ import annotations

from enum import StrEnum


class PrimitiveKind(StrEnum):
    """Built-in scalar kinds."""

    BOOL = "bool"

    # Unsigned integers
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"

    # Signed integers
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"

    # IEEE 754 floating point
    F32 = "f32"
    F64 = "f64"

    @classmethod
    def from_label(cls, label: str) -> PrimitiveKind | None:
        """
        Look up a primitive by its exact label.

        Matching is case-sensitive: ``"u32"`` is a primitive, ``"U32"`` is not.

        Returns:
            The matching member, or None if the label is not a primitive
        """
        return _BY_LABEL.get(label)

    @property
    def label(self) -> str:
        return self.value

    @property
    def bits(self) -> int:
        """Width in bits (1 for bool)."""
        if self is PrimitiveKind.BOOL:
            return 1
        return int(self.value[1:])

    @property
    def is_signed(self) -> bool:
        return self.value[0] in ("i", "f")

    @property
    def is_unsigned(self) -> bool:
        return self.value[0] == "u"

    @property
    def is_float(self) -> bool:
        return self.value[0] == "f"

    @property
    def is_integer(self) -> bool:
        return self.value[0] in ("u", "i")


_BY_LABEL: dict[str, PrimitiveKind] = {kind.value: kind for kind in PrimitiveKind}
