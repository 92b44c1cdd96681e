"""Provides the authorization rule collector.

Authorization rules restrict which clients may access a field and which
operations they may perform on it. Rules are never built directly, instead
a rule-configuring function receives an :class:`AuthRules` collector and
adds rules to it:

.. code-block:: python

    def rules(rules: AuthRules) -> None:
        rules.private().read()
        rules.groups(["admin"])

    str(collector)
    # [{ allow: private, operations: [read] }, { allow: groups, groups: ["admin"] }]

The function is handed to the :code:`auth` method of a field definition,
which wraps the field into an :class:`AuthDefinition`.
"""
import builtins
import enum
from typing import Any, Callable, Iterator

from pydantic import BaseModel, Field
from typing_extensions import Annotated, TypeAlias


class AuthStrategy(str, enum.Enum):
    """Who is allowed to access the guarded field."""

    PRIVATE = "private"
    PUBLIC = "public"
    OWNER = "owner"
    GROUPS = "groups"


class AuthOperation(str, enum.Enum):
    """Operations an authorization rule can be restricted to."""

    CREATE = "create"
    READ = "read"
    GET = "get"
    LIST = "list"
    UPDATE = "update"
    DELETE = "delete"


class AuthRule(BaseModel):
    """A single authorization rule.

    A rule without operations grants every operation. Each of the
    operation methods narrows the rule and returns the rule itself so
    that calls can be chained.
    """

    allow: AuthStrategy
    """The strategy granting access."""

    operations: builtins.list[AuthOperation] = []
    """The operations the rule is restricted to, in insertion order."""

    def _add_operation(self, op: AuthOperation) -> "AuthRule":
        if op not in self.operations:
            self.operations.append(op)
        return self

    def create(self) -> "AuthRule":
        """Allow the create operation."""
        return self._add_operation(AuthOperation.CREATE)

    def read(self) -> "AuthRule":
        """Allow the read operation."""
        return self._add_operation(AuthOperation.READ)

    def get(self) -> "AuthRule":
        """Allow fetching a single item."""
        return self._add_operation(AuthOperation.GET)

    def list(self) -> "AuthRule":
        """Allow fetching a collection of items."""
        return self._add_operation(AuthOperation.LIST)

    def update(self) -> "AuthRule":
        """Allow the update operation."""
        return self._add_operation(AuthOperation.UPDATE)

    def delete(self) -> "AuthRule":
        """Allow the delete operation."""
        return self._add_operation(AuthOperation.DELETE)

    def _render_args(self) -> builtins.list[str]:
        args = ["allow: %s" % self.allow.value]
        if len(self.operations) > 0:
            args.append(
                "operations: [%s]"
                % ", ".join(op.value for op in self.operations)
            )
        return args

    def __str__(self) -> str:
        return "{ %s }" % ", ".join(self._render_args())


class GroupAuthRule(AuthRule):
    """Authorization rule granting access to members of the given groups."""

    allow: AuthStrategy = AuthStrategy.GROUPS

    groups: Annotated[list[str], Field(min_length=1)]
    """The groups granted access, at least one."""

    def _render_args(self) -> list[str]:
        args = super(GroupAuthRule, self)._render_args()
        groups = ", ".join('"%s"' % group for group in self.groups)
        args.insert(1, "groups: [%s]" % groups)
        return args


class AuthRules(object):
    """Collector for authorization rules.

    Each of the strategy methods creates a rule, appends it to the
    collector and returns the new rule for further configuration.
    """

    def __init__(self) -> None:
        """Initialize an empty rule collector."""
        self._rules: list[AuthRule] = []

    @property
    def rules(self) -> tuple[AuthRule, ...]:
        """The collected rules in the order they were added."""
        return tuple(self._rules)

    def _add(self, rule: AuthRule) -> AuthRule:
        self._rules.append(rule)
        return rule

    def private(self) -> AuthRule:
        """Grant access to any signed-in client."""
        return self._add(AuthRule(allow=AuthStrategy.PRIVATE))

    def public(self) -> AuthRule:
        """Grant access to anonymous clients."""
        return self._add(AuthRule(allow=AuthStrategy.PUBLIC))

    def owner(self) -> AuthRule:
        """Grant access to the client owning the entity."""
        return self._add(AuthRule(allow=AuthStrategy.OWNER))

    def groups(self, groups: list[str]) -> GroupAuthRule:
        """Grant access to members of the given groups.

        Args:
            groups (list[str]): The group names, must not be empty.

        Returns:
            GroupAuthRule: The newly added rule.

        Raises:
            pydantic.ValidationError: If no group is given.
        """
        return self._add(GroupAuthRule(groups=groups))

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[AuthRule]:
        return iter(self._rules)

    def __str__(self) -> str:
        return "[%s]" % ", ".join(map(str, self._rules))


AuthRuleF: TypeAlias = Callable[[AuthRules], Any]
"""A function configuring an :class:`AuthRules` collector."""
