"""
Test suite for exact-fractions
"""
