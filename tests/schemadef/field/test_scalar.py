import pytest

from schemadef.field.list import ListDefinition
from schemadef.field.scalar import ScalarDefinition, ScalarType


class TestScalarDefinition(object):
    def test_defaults(self):
        definition = ScalarDefinition()
        assert definition.scalar_type == ScalarType.STRING
        assert not definition.is_optional
        assert str(definition) == "String!"

    @pytest.mark.parametrize("scalar_type", list(ScalarType))
    def test_render(self, scalar_type):
        definition = ScalarDefinition(scalar_type)
        assert str(definition) == scalar_type.value + "!"
        assert definition.optional() is definition
        assert str(definition) == scalar_type.value

    def test_list(self):
        definition = ScalarDefinition(ScalarType.FLOAT)
        lst = definition.list()
        assert isinstance(lst, ListDefinition)
        assert str(lst) == "[Float!]!"

    def test_auth(self):
        definition = ScalarDefinition(ScalarType.EMAIL).optional()
        guarded = definition.auth(lambda rules: rules.owner().update())
        assert definition.is_optional
        assert str(guarded) == (
            "Email @auth(rules: [{ allow: owner, operations: [update] }])"
        )
