"""Provides the object type descriptor.

A :class:`Type` is a named collection of fields. Field definitions are
the builders from :mod:`schemadef.field`, references to other types or
enums, and their authorization-guarded variants:

.. code-block:: python

    address = Type("Address").field("street", ScalarDefinition())
    user = Type("User", {"address": ReferenceDefinition(address).optional()})

    str(user)
    # type User {
    #   address: Address
    # }
"""
from typing import Any, get_args

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypeAlias

from ..common.names import GraphQLName, check_name
from ..config import DEFAULT_CONFIG, SchemaConfig
from ..field.list import ListDefinition
from ..field.scalar import ScalarDefinition
from ..reference import ReferenceDefinition
from .auth import AuthDefinition

FieldDefinition: TypeAlias = (
    ReferenceDefinition | ScalarDefinition | ListDefinition | AuthDefinition
)


class Type(BaseModel):
    """A named object type.

    The name stays assignable. References built from the type before a
    rename keep pointing at the old name.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: GraphQLName
    """The type name."""

    field_definitions: dict[GraphQLName, FieldDefinition] = {}
    """The fields of the type, in insertion order."""

    def __init__(
        self,
        name: str,
        field_definitions: None | dict[str, Any] = None,
        **kwargs
    ) -> None:
        """Initialize the type.

        Args:
            name (str): The type name.
            field_definitions (None | dict[str, FieldDefinition], optional):
                Initial fields of the type. Defaults to None.
            **kwargs: Further model fields.
        """
        super(Type, self).__init__(
            name=name, field_definitions=field_definitions or {}, **kwargs
        )

    def field(self, name: str, definition: FieldDefinition) -> "Type":
        """Add a field to the type.

        Args:
            name (str): The field name.
            definition (FieldDefinition): The field definition.

        Returns:
            Type: This instance.

        Raises:
            ValueError: If the name is invalid or already in use.
            TypeError: If the definition is not a field definition.
        """
        check_name(name)

        if name in self.field_definitions:
            raise ValueError(
                "Field `%s` is already defined on type `%s`"
                % (name, self.name)
            )

        if not isinstance(definition, get_args(FieldDefinition)):
            raise TypeError(
                "Expected a field definition for field `%s`, got %s"
                % (name, repr(definition))
            )

        self.field_definitions[name] = definition
        return self

    def render(self, config: SchemaConfig = DEFAULT_CONFIG) -> str:
        """Render the type block.

        Args:
            config (SchemaConfig): Rendering options.

        Returns:
            str: The type in schema notation.
        """
        if len(self.field_definitions) == 0:
            return "type %s" % self.name

        fields = "\n".join(
            "%s%s: %s" % (config.prefix, name, definition)
            for name, definition in self.field_definitions.items()
        )
        return "type %s {\n%s\n}" % (self.name, fields)

    def __str__(self) -> str:
        return self.render()
