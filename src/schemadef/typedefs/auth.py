"""Provides the definition pairing a field with authorization rules."""
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeAlias

from ..auth import AuthRuleF, AuthRules
from ..field.list import ListDefinition
from ..field.scalar import ScalarDefinition
from ..reference import ReferenceDefinition

logger = logging.getLogger(__name__)

AuthField: TypeAlias = (
    ReferenceDefinition | ScalarDefinition | ListDefinition
)


class AuthDefinition(BaseModel):
    """A field definition guarded by authorization rules.

    The rule-configuring function is called exactly once, at construction,
    with a fresh :class:`~schemadef.auth.AuthRules` collector. The guarded
    field definition is held as is and never modified.

    Renders as :code:`<field> @auth(rules: [<rule>, ...])`.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    field_definition: AuthField = Field(frozen=True)
    """The guarded field definition."""

    auth_rules: AuthRules
    """The rules collected from the rule-configuring function."""

    def __init__(
        self, field_definition: Any, rules: AuthRuleF, **kwargs
    ) -> None:
        """Initialize the definition and collect the rules.

        Args:
            field_definition (AuthField): The field to guard.
            rules (AuthRuleF): Function adding rules to the collector.
            **kwargs: Further model fields.

        Raises:
            ValueError: If the function did not add any rule.
        """
        auth_rules = AuthRules()
        rules(auth_rules)

        if len(auth_rules) == 0:
            raise ValueError(
                "No authorization rules were added for field `%s`"
                % field_definition
            )

        logger.debug(
            "Collected %i authorization rule(s) for field `%s`",
            len(auth_rules),
            field_definition,
        )

        super(AuthDefinition, self).__init__(
            field_definition=field_definition, auth_rules=auth_rules, **kwargs
        )

    def __str__(self) -> str:
        return "%s @auth(rules: %s)" % (
            self.field_definition,
            self.auth_rules,
        )
