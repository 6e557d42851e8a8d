"""
Core Models Package

Data models for C-Test documents.

Unlike most of the package, these models are mutable dataclasses: the
regapping algorithm updates gap flags on existing tokens in place. Only
the token text is fixed after construction.
"""

from .tokens import CTestToken
from .ctest import CTestObject, ArgumentError

__all__ = [
    "CTestToken",
    "CTestObject",
    "ArgumentError",
]
