"""
Core Package

Shared data models for the C-Test toolkit.

Subpackages:
    - models: CTestToken and CTestObject
"""

from .models import CTestToken, CTestObject, ArgumentError

__all__ = [
    "CTestToken",
    "CTestObject",
    "ArgumentError",
]
