"""Provides the list field definition.

A list definition wraps a reference or scalar definition and expresses
that the field holds a sequence of such values. Optionality of the list
and of its elements are independent:

.. code-block:: python

    str(ref.list())                       # [User!]!
    str(ref.optional().list())            # [User]!
    str(ref.optional().list().optional()) # [User]

Lists of lists are not supported.
"""
from typing import Any

from pydantic import BaseModel, Field
from typing_extensions import TypeAlias

from ..auth import AuthRuleF
from ..reference import ReferenceDefinition
from .scalar import ScalarDefinition

ListElement: TypeAlias = ReferenceDefinition | ScalarDefinition


class ListDefinition(BaseModel):
    """A field holding a list of references or scalars.

    The element definition is held by reference, not copied, so changes
    to the element after wrapping are reflected in the rendered list.
    """

    field_definition: ListElement = Field(frozen=True)
    """The definition of the list elements."""

    is_optional: bool = False
    """Whether the list itself may be null."""

    def __init__(self, field_definition: Any, **kwargs) -> None:
        """Initialize the list definition.

        Args:
            field_definition (ReferenceDefinition | ScalarDefinition): The
                element definition.
            **kwargs: Further model fields.
        """
        super(ListDefinition, self).__init__(
            field_definition=field_definition, **kwargs
        )

    def optional(self) -> "ListDefinition":
        """Mark the list as nullable.

        Returns:
            ListDefinition: This instance.
        """
        self.is_optional = True
        return self

    def auth(self, rules: AuthRuleF) -> "AuthDefinition":
        """Attach authorization rules to the list field.

        Args:
            rules (AuthRuleF): Function adding rules to the collector.

        Returns:
            AuthDefinition: A new definition pairing this list with the
            collected rules.
        """
        from ..typedefs.auth import AuthDefinition

        return AuthDefinition(self, rules)

    def __str__(self) -> str:
        required = "" if self.is_optional else "!"
        return "[%s]%s" % (self.field_definition, required)
