"""Provides the rendering configuration shared by all schema definitions."""
from pydantic import BaseModel, ConfigDict, Field


class SchemaConfig(BaseModel):
    """Rendering options for schema definitions.

    Attributes:
        indent (int): Number of spaces used to indent the members of
            type and enum blocks.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    indent: int = Field(default=2, ge=1)

    @property
    def prefix(self) -> str:
        """The whitespace prepended to each member line."""
        return " " * self.indent


DEFAULT_CONFIG = SchemaConfig()
"""Configuration used when no explicit configuration is given."""
