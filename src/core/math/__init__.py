"""
Core math modules

Целочисленные примитивы, на которых построена арифметика Fraction.
"""

from src.core.math.integer_ops import (
    abs_value,
    gcd,
    lcm,
    reduce_pair,
    sign_of,
)

__all__ = [
    "abs_value",
    "gcd",
    "lcm",
    "reduce_pair",
    "sign_of",
]
