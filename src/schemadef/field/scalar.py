"""Provides definitions for fields holding built-in scalar values."""
import enum

from pydantic import BaseModel, Field

from ..auth import AuthRuleF


class ScalarType(str, enum.Enum):
    """The built-in scalar types."""

    STRING = "String"
    ID = "ID"
    INT = "Int"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    DATE = "Date"
    DATETIME = "DateTime"
    EMAIL = "Email"
    IP_ADDRESS = "IPAddress"
    TIMESTAMP = "Timestamp"
    URL = "URL"
    JSON = "JSON"
    PHONE_NUMBER = "PhoneNumber"


class ScalarDefinition(BaseModel):
    """A field holding a scalar value, required by default."""

    scalar_type: ScalarType = Field(default=ScalarType.STRING, frozen=True)
    is_optional: bool = False

    def __init__(
        self, scalar_type: ScalarType = ScalarType.STRING, **kwargs
    ) -> None:
        super(ScalarDefinition, self).__init__(
            scalar_type=scalar_type, **kwargs
        )

    def optional(self) -> "ScalarDefinition":
        """Mark the scalar as nullable and return this instance."""
        self.is_optional = True
        return self

    def list(self) -> "ListDefinition":
        """Wrap the scalar into a new list definition."""
        from .list import ListDefinition

        return ListDefinition(self)

    def auth(self, rules: AuthRuleF) -> "AuthDefinition":
        """Pair the scalar with the authorization rules set up by `rules`."""
        from ..typedefs.auth import AuthDefinition

        return AuthDefinition(self, rules)

    def __str__(self) -> str:
        required = "" if self.is_optional else "!"
        return "%s%s" % (self.scalar_type.value, required)
