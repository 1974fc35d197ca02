"""
Core numeral system models, positional arithmetic, and invariants.

This module contains the foundational building blocks for converting
non-negative integers to and from custom single-character numeral systems.
"""
