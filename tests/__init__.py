"""
Test suite for purefp

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
