"""
Core value types, integer primitives, and contracts.

Exact rational arithmetic generic over the underlying integer type,
with no dependency on floating point.
"""
