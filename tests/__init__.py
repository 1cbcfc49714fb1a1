"""
Test suite for scicalc

Contains:
- tests/unit/          : Unit tests for the primitives, result model, parser and CLI
"""
