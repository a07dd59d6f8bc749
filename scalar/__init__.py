"""
Scalar physical quantities with units, checked for dimensional consistency.
"""
