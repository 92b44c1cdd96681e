"""Named schema entities and definition wrappers.

Classes:
    - :class:`Type`: A named object type with fields.
    - :class:`Enum`: A named enumeration of variants.
    - :class:`AuthDefinition`: A field definition guarded by authorization rules.
"""
from .auth import AuthDefinition
from .enum import Enum
from .type import FieldDefinition, Type
