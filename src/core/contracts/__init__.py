"""
Contract Validation Module

Валидация JSON данных с color identity строками по JSON Schema контракту.
"""

from .validators import (
    ColorIdentityValidator,
    ContractValidator,
    build_color_identity_schema,
    is_valid_color_identity,
    validate_color_identity,
)

__all__ = [
    # Classes
    "ContractValidator",
    "ColorIdentityValidator",
    # Functions
    "build_color_identity_schema",
    "validate_color_identity",
    "is_valid_color_identity",
]
