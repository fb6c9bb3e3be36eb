"""
Centralized constants for arthroprod.

This module defines the fixed data of the algebra: the default registry of
allowed forms, the zet groupings, and the symbols used when rendering terms.
Using these constants keeps parsing, sorting and display consistent across
the library.

Usage:
    from arthroprod.core.constants import ALLOWED_INDICES, XI_SYMBOL
"""

from typing import Dict, List, Tuple


# =============================================================================
# Registry Defaults
# =============================================================================

# The 16 allowed forms in canonical order. Mixed-grade sets are cyclic
# (31, 031) rather than lexicographic (13, 013).
ALLOWED_INDICES: List[str] = [
    "p", "23", "31", "12",        # B
    "0", "023", "031", "012",     # T
    "123", "1", "2", "3",         # A
    "0123", "01", "02", "03",     # E
]

# Expected number of forms of each grade in any valid registry
GRADE_COUNTS: Tuple[int, ...] = (1, 4, 6, 4, 1)

# Number of elements in the algebra
ALGEBRA_DIM: int = 16

# Highest grade (number of axes in the quadrivector)
MAX_GRADE: int = 4

# Index string used for the point (grade 0)
POINT_INDEX: str = "p"


# =============================================================================
# Zets
# =============================================================================

ZET_INDICES: Dict[str, List[str]] = {
    "B": ["p", "23", "31", "12"],
    "T": ["0", "023", "031", "012"],
    "A": ["123", "1", "2", "3"],
    "E": ["0123", "01", "02", "03"],
}


# =============================================================================
# Rendering
# =============================================================================

ALPHA_PREFIX: str = "a"
XI_SYMBOL: str = "ξ"
PARTIAL_SYMBOL: str = "∂"
PRODUCT_SEPARATOR: str = "."
POWER_SEPARATOR: str = "^"
EMPTY_XI: str = "1"

# Logger hierarchy root
LOGGER_NAME: str = "arthroprod"
