"""Provides the enum descriptor."""
import enum
from typing import Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
)
from typing_extensions import Annotated

from ..common.names import GraphQLName, check_unique
from ..config import DEFAULT_CONFIG, SchemaConfig


def _unpack_enum(variants: Any) -> Any:
    # python enums contribute their member names
    if isinstance(variants, type) and issubclass(variants, enum.Enum):
        return [member.name for member in variants]
    return variants


class Enum(BaseModel):
    """A named enumeration of variants.

    Variants are given either as a list of names or as a python
    :class:`enum.Enum` class, whose member names are used.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: GraphQLName
    variants: Annotated[
        list[GraphQLName],
        BeforeValidator(_unpack_enum),
        Field(min_length=1),
        AfterValidator(check_unique),
    ]

    def __init__(self, name: str, variants: Any, **kwargs) -> None:
        super(Enum, self).__init__(name=name, variants=variants, **kwargs)

    def render(self, config: SchemaConfig = DEFAULT_CONFIG) -> str:
        """Render the enum block.

        Args:
            config (SchemaConfig): Rendering options.

        Returns:
            str: The enum in schema notation.
        """
        variants = ",\n".join(config.prefix + v for v in self.variants)
        return "enum %s {\n%s\n}" % (self.name, variants)

    def __str__(self) -> str:
        return self.render()
