"""
Test suite for spoken-number

Contains:
- tests/unit/          : Unit tests for individual modules
"""
