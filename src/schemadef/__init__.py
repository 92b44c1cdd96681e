"""Schema definition toolkit.

Describe data-model types, enums and the references between them with
chainable builders and render them into a GraphQL schema fragment.

Usage Example:
    .. code-block:: python

        from schemadef import Schema

        g = Schema()
        user = g.type("User", {"name": g.string()})
        g.type("Post", {
            "author": g.ref(user),
            "editors": g.ref(user).optional().list(),
            "reviewer": g.ref(user).auth(lambda rules: rules.private()),
        })

        print(g)
"""
from schemadef.__version__ import __version__, __version_tuple__

from .auth import AuthRule, AuthRules, AuthRuleF, GroupAuthRule
from .config import SchemaConfig
from .field import ListDefinition, ScalarDefinition, ScalarType
from .reference import ReferenceDefinition
from .schema import Schema
from .typedefs import AuthDefinition, Enum, Type
