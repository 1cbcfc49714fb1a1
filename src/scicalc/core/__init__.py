"""
Core result model, numerical primitives, and payload contracts.

This module contains the building blocks the expression parser is assembled
from. Nothing here performs I/O or keeps state between calls.
"""
