"""
Domain models and value objects.

Contains the Fraction value type and its serializable snapshot.
"""

from src.core.domain.fraction import DISPLAY_TEMPLATE, REPR_TEMPLATE, Fraction
from src.core.domain.fraction_state import FractionState

__all__ = [
    "DISPLAY_TEMPLATE",
    "REPR_TEMPLATE",
    "Fraction",
    "FractionState",
]
