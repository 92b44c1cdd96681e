from unittest.mock import MagicMock

import pytest

from schemadef.auth import AuthRules
from schemadef.field.scalar import ScalarDefinition
from schemadef.reference import ReferenceDefinition
from schemadef.typedefs.auth import AuthDefinition
from schemadef.typedefs.type import Type


class TestAuthDefinition(object):
    def test_rules_called_once(self):
        rules = MagicMock(side_effect=lambda r: r.public())
        definition = AuthDefinition(ScalarDefinition(), rules)

        rules.assert_called_once()
        (collector,), _ = rules.call_args
        assert isinstance(collector, AuthRules)
        assert collector is definition.auth_rules

    def test_render(self):
        def rules(r):
            r.private().read()
            r.groups(["admin"])

        definition = AuthDefinition(ReferenceDefinition(Type("User")), rules)
        assert str(definition) == (
            "User! @auth(rules: [{ allow: private, operations: [read] }, "
            '{ allow: groups, groups: ["admin"] }])'
        )

    def test_no_rules(self):
        with pytest.raises(ValueError):
            AuthDefinition(ScalarDefinition(), lambda r: None)

    def test_field_not_mutated(self):
        ref = ReferenceDefinition(Type("User"))
        before = ref.model_dump()
        AuthDefinition(ref, lambda r: r.owner())
        assert ref.model_dump() == before
