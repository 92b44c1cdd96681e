"""Defines the high-level interface for assembling a schema.

The :class:`Schema` class registers named types and enums, hands out the
field builders and renders everything registered into a single schema
fragment.

Usage Example:
    Describe two related types:

    .. code-block:: python

        g = Schema()

        color = g.enum("Color", ["Red", "Green"])
        user = g.type("User", {"favorite": g.ref(color).optional()})
        g.type("Team", {"members": g.ref(user).list()})

        print(g)
        # enum Color {
        #   Red,
        #   Green
        # }
        #
        # type User {
        #   favorite: Color
        # }
        #
        # type Team {
        #   members: [User!]!
        # }
"""
import logging
from types import MappingProxyType
from typing import Any

from .config import SchemaConfig
from .field.scalar import ScalarDefinition, ScalarType
from .reference import ReferenceDefinition
from .typedefs.enum import Enum
from .typedefs.type import FieldDefinition, Type

logger = logging.getLogger(__name__)


class Schema(object):
    """Registry of the types and enums making up a schema.

    Names are unique across types and enums, checked against the current
    names of the registered descriptors. Entities are rendered in
    registration order, enums before types.
    """

    def __init__(self, config: None | SchemaConfig = None) -> None:
        """Initialize an empty schema.

        Args:
            config (None | SchemaConfig, optional): Rendering options.
                Defaults to the default configuration.
        """
        self._config = config if config is not None else SchemaConfig()
        self._types: list[Type] = []
        self._enums: list[Enum] = []

    @property
    def config(self) -> SchemaConfig:
        """The rendering options of the schema."""
        return self._config

    @property
    def types(self) -> MappingProxyType[str, Type]:
        """Read-only view of the registered types by current name."""
        return MappingProxyType({t.name: t for t in self._types})

    @property
    def enums(self) -> MappingProxyType[str, Enum]:
        """Read-only view of the registered enums by current name."""
        return MappingProxyType({e.name: e for e in self._enums})

    @property
    def names(self) -> list[str]:
        """Current names of the registered enums and types."""
        return [
            d.name
            for d in (*self._enums, *self._types)
        ]

    def _check_unique(self, name: str) -> None:
        if name in self.names:
            raise ValueError(
                "Name `%s` is already defined in the schema" % name
            )

    def type(
        self, name: str, fields: None | dict[str, FieldDefinition] = None
    ) -> Type:
        """Register a new type.

        Args:
            name (str): The type name.
            fields (None | dict[str, FieldDefinition], optional): The
                fields of the type. More can be added with
                :meth:`Type.field`. Defaults to None.

        Returns:
            Type: The registered type.

        Raises:
            ValueError: If the name is already in use.
        """
        self._check_unique(name)
        typedef = Type(name, fields)
        self._types.append(typedef)
        logger.debug("Registered type `%s`", name)
        return typedef

    def enum(self, name: str, variants: Any) -> Enum:
        """Register a new enum.

        Args:
            name (str): The enum name.
            variants (list[str] | type[enum.Enum]): The enum variants.

        Returns:
            Enum: The registered enum.

        Raises:
            ValueError: If the name is already in use.
        """
        self._check_unique(name)
        enumdef = Enum(name, variants)
        self._enums.append(enumdef)
        logger.debug("Registered enum `%s`", name)
        return enumdef

    def ref(self, source: Type | Enum) -> ReferenceDefinition:
        """Create a required reference to the given type or enum."""
        return ReferenceDefinition(source)

    def scalar(self, scalar_type: ScalarType) -> ScalarDefinition:
        """Create a required field of the given scalar type."""
        return ScalarDefinition(scalar_type)

    def string(self) -> ScalarDefinition:
        return self.scalar(ScalarType.STRING)

    def id(self) -> ScalarDefinition:
        return self.scalar(ScalarType.ID)

    def int(self) -> ScalarDefinition:
        return self.scalar(ScalarType.INT)

    def float(self) -> ScalarDefinition:
        return self.scalar(ScalarType.FLOAT)

    def boolean(self) -> ScalarDefinition:
        return self.scalar(ScalarType.BOOLEAN)

    def date(self) -> ScalarDefinition:
        return self.scalar(ScalarType.DATE)

    def datetime(self) -> ScalarDefinition:
        return self.scalar(ScalarType.DATETIME)

    def email(self) -> ScalarDefinition:
        return self.scalar(ScalarType.EMAIL)

    def url(self) -> ScalarDefinition:
        return self.scalar(ScalarType.URL)

    def json(self) -> ScalarDefinition:
        return self.scalar(ScalarType.JSON)

    def render(self) -> str:
        """Render all registered enums and types.

        Returns:
            str: The schema fragment, entities separated by blank lines.

        Raises:
            ValueError: If renaming left two entities with the same name.
        """
        names = self.names
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if len(duplicates) > 0:
            raise ValueError(
                "Names %s are defined more than once in the schema"
                % duplicates
            )

        blocks = [e.render(self._config) for e in self._enums]
        blocks.extend(t.render(self._config) for t in self._types)
        logger.debug(
            "Rendering %i enum(s) and %i type(s)",
            len(self._enums),
            len(self._types),
        )
        return "\n\n".join(blocks)

    def __str__(self) -> str:
        return self.render()

