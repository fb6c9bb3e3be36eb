"""
Core module for arthroprod.

Contains:
- Constants: The default registry, zet groupings and rendering symbols
- Types: Type aliases for loosely typed arguments and tensor exports
- Errors: Recoverable construction errors and fatal invariant errors
"""

from .constants import (
    # Registry defaults
    ALLOWED_INDICES,
    GRADE_COUNTS,
    ALGEBRA_DIM,
    MAX_GRADE,
    POINT_INDEX,
    ZET_INDICES,
    # Rendering
    ALPHA_PREFIX,
    XI_SYMBOL,
    PARTIAL_SYMBOL,
    PRODUCT_SEPARATOR,
    POWER_SEPARATOR,
    EMPTY_XI,
    LOGGER_NAME,
)

from .types import (
    AxisLike,
    FormLike,
    MagnitudeLike,
    ARLike,
    SummationKey,
    CayleyTables,
    SignTable,
)

from .errors import (
    ArError,
    InvalidIndexError,
    InvalidFormError,
    FormNotAllowedError,
    InvalidConfigError,
    AlgebraInvariantError,
)

__all__ = [
    # Constants
    "ALLOWED_INDICES",
    "GRADE_COUNTS",
    "ALGEBRA_DIM",
    "MAX_GRADE",
    "POINT_INDEX",
    "ZET_INDICES",
    "ALPHA_PREFIX",
    "XI_SYMBOL",
    "PARTIAL_SYMBOL",
    "PRODUCT_SEPARATOR",
    "POWER_SEPARATOR",
    "EMPTY_XI",
    "LOGGER_NAME",
    # Types
    "AxisLike",
    "FormLike",
    "MagnitudeLike",
    "ARLike",
    "SummationKey",
    "CayleyTables",
    "SignTable",
    # Errors
    "ArError",
    "InvalidIndexError",
    "InvalidFormError",
    "FormNotAllowedError",
    "InvalidConfigError",
    "AlgebraInvariantError",
]
