"""
Core math modules для color identity

Чистые функции над каноническими color identity строками.
"""

# Set Algebra
from src.core.math.set_algebra import (
    add,
    contains,
    eq,
    gt,
    gte,
    lt,
    lte,
    neq,
    subtract,
)

# Enumeration
from src.core.math.enumeration import (
    components,
    sub_color_identities,
)

__all__ = [
    # Set Algebra
    "add",
    "subtract",
    "contains",
    "eq",
    "neq",
    "gt",
    "gte",
    "lt",
    "lte",
    # Enumeration
    "components",
    "sub_color_identities",
]
