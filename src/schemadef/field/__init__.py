"""Field definitions for scalars and lists."""
from .list import ListDefinition
from .scalar import ScalarDefinition, ScalarType
