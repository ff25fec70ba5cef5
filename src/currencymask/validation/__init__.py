"""Validation message composition for engine state transitions.

Python 3.13+.
"""

from .composer import ValidationInput, compose_diagnostic, compose_error

__all__ = [
    "ValidationInput",
    "compose_diagnostic",
    "compose_error",
]
