"""
Schema validation utilities for PowerPath question pools.

Provides JSON Schema validation with clear error messages for raw
question items before they are converted into engine questions.

Features:
- Draft 7 validation with format checking
- Human-readable error paths
- Pool-level checks (unique ids within a pool)
"""

import json
from pathlib import Path
from typing import Any, Iterable, Optional

from jsonschema import Draft7Validator, FormatChecker, ValidationError

try:
    from ..config import config
except ImportError:
    from src.config import config


class ValidationResult:
    """
    Result of a validation attempt.

    Attributes:
        valid: Whether data passed validation
        errors: List of error messages
        data: The validated data
    """

    def __init__(self, valid: bool, errors: list[str], data: Any = None):
        self.valid = valid
        self.errors = errors
        self.data = data

    def __bool__(self) -> bool:
        """Allow using result in boolean context."""
        return self.valid

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.valid:
            return "✓ Validation passed"
        return f"✗ Validation failed with {len(self.errors)} error(s):\n" + "\n".join(
            f"  - {error}" for error in self.errors
        )


class SchemaValidator:
    """
    JSON Schema validator.

    Usage:
        validator = SchemaValidator("path/to/schema.json")
        result = validator.validate(data)
        if not result:
            print(result.errors)
    """

    def __init__(self, schema_path: Path | str):
        """
        Initialize validator with a schema file.

        Args:
            schema_path: Path to JSON Schema file
        """
        self.schema_path = Path(schema_path)
        with open(self.schema_path, "r") as f:
            self.schema = json.load(f)
        self.validator = Draft7Validator(self.schema, format_checker=FormatChecker())

    def validate(self, data: Any) -> ValidationResult:
        """
        Validate data against schema.

        Args:
            data: Data to validate

        Returns:
            ValidationResult with validation status and any errors
        """
        errors = [self._format_error(error) for error in self.validator.iter_errors(data)]
        return ValidationResult(valid=not errors, errors=errors, data=data)

    def _format_error(self, error: ValidationError) -> str:
        """
        Convert ValidationError to human-readable message.

        Args:
            error: jsonschema ValidationError

        Returns:
            Formatted error message with the failing path
        """
        path = " -> ".join(str(p) for p in error.path) if error.path else "root"
        return f"At '{path}': {error.message}"


class QuestionValidator(SchemaValidator):
    """Validator for raw question items (uses config.paths.question_schema)."""

    def __init__(self, schema_path: Optional[Path | str] = None):
        super().__init__(schema_path or config.paths.question_schema)

    def validate_pool(self, items: Iterable[dict], pool_name: str = "pool") -> ValidationResult:
        """
        Validate every item of a pool and check id uniqueness.

        Args:
            items: Raw question mappings
            pool_name: Label used in error messages

        Returns:
            ValidationResult over the whole pool
        """
        items = list(items)
        errors = []
        seen_ids = set()

        for index, item in enumerate(items):
            for error in self.validate(item).errors:
                errors.append(f"{pool_name}[{index}]: {error}")

            item_id = item.get("id") if isinstance(item, dict) else None
            if item_id is None:
                continue
            if item_id in seen_ids:
                errors.append(f"{pool_name}[{index}]: duplicate question id '{item_id}'")
            seen_ids.add(item_id)

        return ValidationResult(valid=not errors, errors=errors, data=items)


_question_validator: Optional[QuestionValidator] = None


def get_question_validator() -> QuestionValidator:
    """Get cached QuestionValidator instance."""
    global _question_validator
    if _question_validator is None:
        _question_validator = QuestionValidator()
    return _question_validator


def validate_question(item: dict) -> ValidationResult:
    """Convenience function to validate a single raw question."""
    return get_question_validator().validate(item)


def validate_question_pool(items: Iterable[dict], pool_name: str = "pool") -> ValidationResult:
    """Convenience function to validate a raw question pool."""
    return get_question_validator().validate_pool(items, pool_name)
