"""Provides the reference field definition.

A reference is a field pointing at another named schema entity, either a
:class:`~schemadef.typedefs.type.Type` or an
:class:`~schemadef.typedefs.enum.Enum`. References are required by default
and render as the referenced name followed by the non-null marker:

.. code-block:: python

    user = Type("User")
    ref = ReferenceDefinition(user)
    str(ref)             # User!
    str(ref.optional())  # User

The builder mutates in place, :meth:`ReferenceDefinition.optional` returns
the same instance. All holders of the instance, including list and auth
wrappers built from it earlier, observe the change.
"""
from typing import Any

from pydantic import BaseModel, BeforeValidator, Field
from typing_extensions import Annotated

from .auth import AuthRuleF


def get_name(source: Any) -> Any:
    """Reduce a type or enum descriptor to its name.

    Strings and other objects without a :code:`name` attribute are
    returned unchanged and left to the field validation.
    """
    return getattr(source, "name", source)


class ReferenceDefinition(BaseModel):
    """A field referencing a named type or enum.

    The name of the referenced entity is copied at construction time, so
    renaming the source descriptor later does not affect the reference.
    """

    referenced_type: Annotated[
        str, BeforeValidator(get_name), Field(min_length=1, frozen=True)
    ]
    """Name of the referenced type or enum, immutable."""

    is_optional: bool = False
    """Whether the referenced value may be null."""

    def __init__(self, referenced_type: Any, **kwargs) -> None:
        """Initialize the reference.

        Args:
            referenced_type (Type | Enum | str): The descriptor of the
                referenced entity, or its name.
            **kwargs: Further model fields.
        """
        super(ReferenceDefinition, self).__init__(
            referenced_type=referenced_type, **kwargs
        )

    def optional(self) -> "ReferenceDefinition":
        """Mark the reference as nullable.

        Returns:
            ReferenceDefinition: This instance.
        """
        self.is_optional = True
        return self

    def list(self) -> "ListDefinition":
        """Wrap the reference into a list.

        Returns:
            ListDefinition: A new list definition holding this reference
            as its element.
        """
        from .field.list import ListDefinition

        return ListDefinition(self)

    def auth(self, rules: AuthRuleF) -> "AuthDefinition":
        """Attach authorization rules to the reference.

        Args:
            rules (AuthRuleF): Function adding rules to the given
                :class:`~schemadef.auth.AuthRules` collector.

        Returns:
            AuthDefinition: A new definition pairing this reference with
            the collected rules.
        """
        from .typedefs.auth import AuthDefinition

        return AuthDefinition(self, rules)

    def __str__(self) -> str:
        required = "" if self.is_optional else "!"
        return "%s%s" % (self.referenced_type, required)
