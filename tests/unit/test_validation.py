"""
Unit tests for question schema validation.
"""

import json

import pytest

from src.utils.validation import (
    QuestionValidator,
    SchemaValidator,
    ValidationResult,
    validate_question,
    validate_question_pool,
)


class TestValidationResult:
    """Test suite for ValidationResult."""

    def test_bool_and_str(self):
        """Test truthiness and string form."""
        assert ValidationResult(True, [])
        failed = ValidationResult(False, ["At 'root': bad"])
        assert not failed
        assert "1 error(s)" in str(failed)


class TestQuestionValidation:
    """Test suite for raw question validation."""

    def test_valid_item(self, raw_quiz_item):
        """Test a valid game-format item."""
        result = validate_question(raw_quiz_item)
        assert result.valid, result.errors

    def test_missing_required_field(self, raw_quiz_item):
        """Test a missing required field is reported."""
        del raw_quiz_item["prompt"]
        result = validate_question(raw_quiz_item)
        assert not result.valid
        assert any("'prompt' is a required property" in e for e in result.errors)

    def test_bad_choice_reports_path(self, raw_quiz_item):
        """Test errors carry the path to the bad value."""
        raw_quiz_item["choices"][1]["correct"] = "yes"
        result = validate_question(raw_quiz_item)
        assert not result.valid
        assert any(e.startswith("At 'choices -> 1 -> correct'") for e in result.errors)

    @pytest.mark.parametrize("descriptor", [None, 3, 2.5, "moderate"])
    def test_any_difficulty_descriptor_accepted(self, raw_quiz_item, descriptor):
        """Test free-form difficulty descriptors pass at both levels."""
        raw_quiz_item["difficulty"] = descriptor
        raw_quiz_item["metadata"]["difficulty"] = descriptor
        result = validate_question(raw_quiz_item)
        assert result.valid, result.errors

    def test_textual_dok_accepted(self, raw_quiz_item):
        """Test a depth-of-knowledge value given as text."""
        raw_quiz_item["metadata"]["dok"] = "2"
        assert validate_question(raw_quiz_item)

    def test_pool_detects_duplicates(self, raw_quiz_item):
        """Test duplicate ids in a pool are reported."""
        result = validate_question_pool([raw_quiz_item, dict(raw_quiz_item)], pool_name="quiz")
        assert not result.valid
        assert result.errors == ["quiz[1]: duplicate question id 'quiz-001'"]

    def test_pool_prefixes_item_errors(self, raw_quiz_item):
        """Test item errors are prefixed with pool and index."""
        result = validate_question_pool([raw_quiz_item, {"id": "x"}], pool_name="guiding")
        assert not result.valid
        assert all(e.startswith("guiding[1]: ") for e in result.errors)

    def test_empty_pool_is_valid(self):
        """Test an empty pool is valid."""
        assert validate_question_pool([])


class TestCustomSchema:
    """Test suite for validators built from other schema files."""

    def test_custom_schema_file(self, tmp_path):
        """Test validators built from another schema file."""
        schema = {
            "$schema": "http://json-schema.org/draft-07/schema#",
            "type": "object",
            "required": ["id"],
        }
        schema_file = tmp_path / "custom.schema.json"
        schema_file.write_text(json.dumps(schema))

        assert SchemaValidator(schema_file).validate({"id": "a"})
        assert not QuestionValidator(schema_file).validate({})

    def test_missing_schema_file(self, tmp_path):
        """Test a missing schema file raises."""
        with pytest.raises(FileNotFoundError):
            SchemaValidator(tmp_path / "missing.json")
