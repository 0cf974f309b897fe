"""
Core domain models, mathematical primitives, and contracts.

Everything here is independent of the phrase codec built on top of it.
"""
