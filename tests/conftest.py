"""Shared pytest fixtures for Bloom tests."""

import pytest

from bloom.core import ir


@pytest.fixture
def particle_struct() -> ir.StructSpec:
    """Return a struct mixing primitives and struct references."""
    return ir.StructSpec(
        name="Particle",
        fields=[
            ir.FieldSpec(name="position", type=ir.IdentifierType(name="Vector3")),
            ir.FieldSpec(name="velocity", type=ir.IdentifierType(name="Vector3")),
            ir.FieldSpec(name="mass", type=ir.PrimitiveType(primitive=ir.PrimitiveKind.F32)),
            ir.FieldSpec(name="alive", type=ir.PrimitiveType(primitive=ir.PrimitiveKind.BOOL)),
        ],
    )
