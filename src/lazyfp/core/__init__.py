"""
Core functional primitives, numerical methods and domain conversions.

Everything here is pure: no I/O, no shared state.
"""
