"""Validators for names used in schema definitions.

Type, enum, variant and field names all follow the GraphQL name rule: a
letter or underscore followed by any number of letters, digits or
underscores. The :data:`GraphQLName` annotation attaches this check to a
pydantic field.
"""
import re

from pydantic import AfterValidator
from typing_extensions import Annotated

NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


def check_name(name: str) -> str:
    """Check that the given string is a valid GraphQL name.

    Args:
        name (str): The name to check.

    Returns:
        str: The unchanged name.

    Raises:
        ValueError: If the name does not match :data:`NAME_PATTERN`.
    """
    if NAME_PATTERN.match(name) is None:
        raise ValueError(
            "Invalid name `%s`, names must match the pattern %s"
            % (name, NAME_PATTERN.pattern)
        )
    return name


def check_unique(names: list[str]) -> list[str]:
    """Check that a list of names contains no duplicates.

    Args:
        names (list[str]): The names to check.

    Returns:
        list[str]: The unchanged list of names.

    Raises:
        ValueError: If any name occurs more than once.
    """
    seen = set()
    for name in names:
        if name in seen:
            raise ValueError("Duplicate name `%s` in %s" % (name, names))
        seen.add(name)
    return names


GraphQLName = Annotated[str, AfterValidator(check_name)]
"""A string annotated with the GraphQL name check."""
