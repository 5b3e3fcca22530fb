"""Tests for Bloom IR types."""

import pytest
from pydantic import ValidationError

from bloom.core.dsl_parser_impl import parse_struct
from bloom.core.ir import (
    FieldSpec,
    IdentifierType,
    PrimitiveKind,
    PrimitiveType,
    StructSpec,
)
from bloom.core.results import Success


class TestPrimitiveKind:
    """Tests for the primitive vocabulary enum."""

    def test_labels_are_lowercase_names(self) -> None:
        for kind in PrimitiveKind:
            assert kind.value == kind.name.lower()
            assert str(kind) == kind.label == kind.value

    def test_vocabulary_size(self) -> None:
        assert len(PrimitiveKind) == 11

    def test_from_label(self) -> None:
        assert PrimitiveKind.from_label("u32") is PrimitiveKind.U32
        assert PrimitiveKind.from_label("U32") is None
        assert PrimitiveKind.from_label("u128") is None
        assert PrimitiveKind.from_label("") is None

    def test_bits(self) -> None:
        assert PrimitiveKind.BOOL.bits == 1
        assert PrimitiveKind.U8.bits == 8
        assert PrimitiveKind.I16.bits == 16
        assert PrimitiveKind.F32.bits == 32
        assert PrimitiveKind.U64.bits == 64

    def test_classification(self) -> None:
        assert PrimitiveKind.U16.is_unsigned and PrimitiveKind.U16.is_integer
        assert PrimitiveKind.I32.is_signed and PrimitiveKind.I32.is_integer
        assert PrimitiveKind.F64.is_float and PrimitiveKind.F64.is_signed
        assert not PrimitiveKind.F64.is_integer
        bool_kind = PrimitiveKind.BOOL
        assert not (bool_kind.is_signed or bool_kind.is_unsigned or bool_kind.is_float)
        assert not bool_kind.is_integer


class TestTypeRefs:
    """Tests for primitive and identifier type references."""

    def test_rendering(self) -> None:
        assert str(PrimitiveType(primitive=PrimitiveKind.I8)) == "i8"
        assert str(IdentifierType(name="Vector3")) == "Vector3"

    def test_identifier_name_validated(self) -> None:
        with pytest.raises(ValidationError):
            IdentifierType(name="3d")

    @pytest.mark.parametrize("kind", list(PrimitiveKind), ids=lambda k: k.value)
    def test_identifier_rejects_primitive_label(self, kind: PrimitiveKind) -> None:
        with pytest.raises(ValidationError):
            IdentifierType(name=kind.value)

    def test_identifier_allows_near_miss_label(self) -> None:
        assert IdentifierType(name="U32").name == "U32"
        assert IdentifierType(name="u128").name == "u128"

    def test_hand_built_reference_round_trips(self) -> None:
        struct = StructSpec(
            name="A", fields=[FieldSpec(name="a", type=IdentifierType(name="u32x"))]
        )
        result = parse_struct(str(struct))
        assert isinstance(result, Success)
        assert result.value == struct

    def test_equality_is_structural(self) -> None:
        assert IdentifierType(name="A") == IdentifierType(name="A")
        assert PrimitiveType(primitive=PrimitiveKind.U8) != PrimitiveType(
            primitive=PrimitiveKind.I8
        )

    def test_field_type_from_dict(self) -> None:
        primitive = FieldSpec.model_validate({"name": "a", "type": {"primitive": "u8"}})
        reference = FieldSpec.model_validate({"name": "b", "type": {"name": "Other"}})
        assert primitive.type == PrimitiveType(primitive=PrimitiveKind.U8)
        assert reference.type == IdentifierType(name="Other")


class TestFieldSpec:
    """Tests for FieldSpec."""

    def test_rendering(self) -> None:
        field = FieldSpec(name="mass", type=PrimitiveType(primitive=PrimitiveKind.F32))
        assert str(field) == "mass: f32"

    def test_name_validated(self) -> None:
        with pytest.raises(ValidationError):
            FieldSpec(name="bad name", type=IdentifierType(name="A"))

    def test_frozen(self) -> None:
        field = FieldSpec(name="a", type=IdentifierType(name="A"))
        with pytest.raises(ValidationError):
            field.name = "b"  # type: ignore[misc]


class TestStructSpec:
    """Tests for StructSpec."""

    def test_empty_rendering(self) -> None:
        assert str(StructSpec(name="Empty")) == "struct Empty {}"

    def test_rendering(self, particle_struct: StructSpec) -> None:
        assert str(particle_struct) == (
            "struct Particle { position: Vector3, velocity: Vector3, mass: f32, alive: bool }"
        )

    def test_rendering_reparses_to_equal_value(self, particle_struct: StructSpec) -> None:
        result = parse_struct(str(particle_struct))
        assert isinstance(result, Success)
        assert result.value == particle_struct
        assert result.remaining == ""

    def test_name_validated(self) -> None:
        with pytest.raises(ValidationError):
            StructSpec(name="_private")

    def test_field_names(self, particle_struct: StructSpec) -> None:
        assert particle_struct.field_names == ["position", "velocity", "mass", "alive"]

    def test_get_field(self, particle_struct: StructSpec) -> None:
        mass = particle_struct.get_field("mass")
        assert mass is not None
        assert mass.type == PrimitiveType(primitive=PrimitiveKind.F32)
        assert particle_struct.get_field("missing") is None

    def test_get_field_returns_first_duplicate(self) -> None:
        struct = StructSpec(
            name="Dup",
            fields=[
                FieldSpec(name="a", type=PrimitiveType(primitive=PrimitiveKind.U8)),
                FieldSpec(name="a", type=PrimitiveType(primitive=PrimitiveKind.U16)),
            ],
        )
        first = struct.get_field("a")
        assert first is not None
        assert first.type == PrimitiveType(primitive=PrimitiveKind.U8)

    def test_referenced_names(self, particle_struct: StructSpec) -> None:
        assert particle_struct.referenced_names == ["Vector3"]

    def test_json_dump(self) -> None:
        struct = StructSpec(
            name="P",
            fields=[FieldSpec(name="x", type=PrimitiveType(primitive=PrimitiveKind.F32))],
        )
        assert struct.model_dump(mode="json") == {
            "name": "P",
            "fields": [{"name": "x", "type": {"primitive": "f32"}}],
        }

    def test_fields_stored_as_tuple(self) -> None:
        struct = StructSpec(
            name="P",
            fields=[FieldSpec(name="x", type=PrimitiveType(primitive=PrimitiveKind.F32))],
        )
        assert isinstance(struct.fields, tuple)
        with pytest.raises(AttributeError):
            struct.fields.append(  # type: ignore[attr-defined]
                FieldSpec(name="y", type=PrimitiveType(primitive=PrimitiveKind.F32))
            )
        assert struct.field_names == ["x"]

    def test_frozen(self, particle_struct: StructSpec) -> None:
        with pytest.raises(ValidationError):
            particle_struct.fields = ()  # type: ignore[misc]

    def test_parsed_struct_is_hashable(self) -> None:
        result = parse_struct("struct A { a: u8, b: Other }")
        assert isinstance(result, Success)
        again = parse_struct("struct A {a:u8,b:Other}")
        assert isinstance(again, Success)
        assert hash(result.value) == hash(again.value)
        assert len({result.value, again.value}) == 1
