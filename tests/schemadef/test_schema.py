import enum

import pytest
from pydantic import ValidationError

from schemadef.config import SchemaConfig
from schemadef.field.scalar import ScalarDefinition, ScalarType
from schemadef.reference import ReferenceDefinition
from schemadef.schema import Schema


class Fruit(enum.Enum):
    APPLE = 1
    ORANGE = 2


class TestSchema(object):
    def test_empty(self):
        assert str(Schema()) == ""

    def test_register(self):
        g = Schema()
        user = g.type("User", {"name": g.string()})
        fruit = g.enum("Fruit", Fruit)

        assert dict(g.types) == {"User": user}
        assert dict(g.enums) == {"Fruit": fruit}
        assert fruit.variants == ["APPLE", "ORANGE"]

    @pytest.mark.parametrize(
        "first, second",
        [("type", "type"), ("type", "enum"), ("enum", "type")],
    )
    def test_duplicate_names(self, first, second):
        g = Schema()
        register = {
            "type": lambda: g.type("User"),
            "enum": lambda: g.enum("User", ["A"]),
        }
        register[first]()
        with pytest.raises(ValueError):
            register[second]()

    def test_duplicate_after_rename(self):
        g = Schema()
        user = g.type("User")
        user.name = "Person"
        # the current name is taken, the registered one is free again
        with pytest.raises(ValueError):
            g.type("Person")
        with pytest.raises(ValueError):
            g.enum("Person", ["A"])
        g.type("User")
        assert g.names == ["Person", "User"]

    def test_render_rejects_renamed_duplicates(self):
        g = Schema()
        color = g.enum("Color", ["Red"])
        g.type("User")
        color.name = "User"
        with pytest.raises(ValueError):
            str(g)
        color.name = "Colour"
        assert str(g) == "enum Colour {\n  Red\n}\n\ntype User"

    def test_ref(self):
        g = Schema()
        user = g.type("User")
        ref = g.ref(user)

        assert isinstance(ref, ReferenceDefinition)
        assert str(ref) == "User!"
        assert str(g.ref(user).optional()) == "User"

    @pytest.mark.parametrize(
        "method, scalar_type",
        [
            ("string", ScalarType.STRING),
            ("id", ScalarType.ID),
            ("int", ScalarType.INT),
            ("float", ScalarType.FLOAT),
            ("boolean", ScalarType.BOOLEAN),
            ("date", ScalarType.DATE),
            ("datetime", ScalarType.DATETIME),
            ("email", ScalarType.EMAIL),
            ("url", ScalarType.URL),
            ("json", ScalarType.JSON),
        ],
    )
    def test_scalar_shortcuts(self, method, scalar_type):
        definition = getattr(Schema(), method)()
        assert isinstance(definition, ScalarDefinition)
        assert definition.scalar_type == scalar_type
        assert str(definition) == scalar_type.value + "!"

    def test_render(self):
        g = Schema()
        color = g.enum("Color", ["Red", "Green"])
        user = g.type(
            "User",
            {"name": g.string(), "favorite": g.ref(color).optional()},
        )
        g.type("Team").field("members", g.ref(user).list()).field(
            "owner", g.ref(user).auth(lambda rules: rules.private().read())
        )

        assert str(g) == (
            "enum Color {\n"
            "  Red,\n"
            "  Green\n"
            "}\n"
            "\n"
            "type User {\n"
            "  name: String!\n"
            "  favorite: Color\n"
            "}\n"
            "\n"
            "type Team {\n"
            "  members: [User!]!\n"
            "  owner: User! @auth(rules: [{ allow: private, "
            "operations: [read] }])\n"
            "}"
        )

    def test_render_with_config(self):
        g = Schema(SchemaConfig(indent=4))
        g.type("User", {"name": g.string().optional()})
        assert g.config.indent == 4
        assert str(g) == "type User {\n    name: String\n}"

    def test_invalid_config(self):
        with pytest.raises(ValidationError):
            SchemaConfig(indent=0)
        with pytest.raises(ValidationError):
            SchemaConfig(tabs=True)
