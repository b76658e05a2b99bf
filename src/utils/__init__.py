"""
Utility modules for PowerPath.

This module contains utility functions:
- validation: JSON Schema validation of raw question pools
"""

from .validation import (
    QuestionValidator,
    SchemaValidator,
    ValidationResult,
    validate_question,
    validate_question_pool,
)

__all__ = [
    "QuestionValidator",
    "SchemaValidator",
    "ValidationResult",
    "validate_question",
    "validate_question_pool",
]
