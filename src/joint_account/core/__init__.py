"""
Core domain models, numerical primitives, and contracts.

Everything here is independent of the command-line surface.
"""
