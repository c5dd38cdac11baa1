"""
Tests for the validators module.
"""

import pytest
from src.validators import GeometryValidator
from src.models import ImpositionConfig, ValidationResult


class TestGeometryValidator:
    """Tests for GeometryValidator class."""

    def test_valid_page_count(self):
        """Test that a positive page count passes."""
        assert GeometryValidator.validate_page_count(1).is_valid

    def test_zero_page_count(self):
        """Test that zero pages is invalid."""
        result = GeometryValidator.validate_page_count(0)

        assert not result.is_valid
        assert "at least one page" in result.errors[0]

    def test_page_size_errors_collected(self):
        """Test that both bad dimensions are reported."""
        result = GeometryValidator.validate_page_size((0, -3))

        assert not result.is_valid
        assert len(result.errors) == 2

    def test_valid_geometry(self):
        """Test a normal A4 document with modest padding."""
        result = GeometryValidator.validate_geometry(10, (595, 842), ImpositionConfig(padding=12))

        assert result.is_valid
        assert not result.has_issues()

    def test_padding_too_wide(self):
        """Test that padding larger than a quarter sheet width is rejected."""
        config = ImpositionConfig(sheet_size=(1000, 500), padding=260)
        result = GeometryValidator.validate_geometry(4, (400, 500), config)

        assert not result.is_valid
        assert any("horizontal" in e for e in result.errors)

    def test_double_print_padding_limit(self):
        """Test that double-print halves the vertical space available to padding."""
        config = ImpositionConfig(sheet_size=(1000, 500), padding=125)

        assert GeometryValidator.validate_geometry(4, (400, 500), config).is_valid

        double = ImpositionConfig(sheet_size=(1000, 500), padding=125, double_print=True)
        result = GeometryValidator.validate_geometry(4, (400, 500), double)
        assert not result.is_valid
        assert any("vertical" in e for e in result.errors)

    def test_all_errors_combined(self):
        """Test that page count, size and padding errors are all reported."""
        config = ImpositionConfig(sheet_size=(100, 100), padding=60)
        result = GeometryValidator.validate_geometry(0, (-1, 10), config)

        assert len(result.errors) == 4
        assert result.get_summary() == "4 error(s)"

    def test_uniform_page_sizes(self):
        """Test that same-sized pages produce no warning."""
        result = GeometryValidator.check_uniform_page_sizes([(595, 842)] * 5)

        assert result.is_valid
        assert not result.warnings

    def test_mixed_page_sizes_warn(self):
        """Test that pages differing from page 1 are listed in a warning."""
        sizes = [(595, 842), (595, 842), (842, 595), (612, 792)]
        result = GeometryValidator.check_uniform_page_sizes(sizes)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "2 page(s)" in result.warnings[0]
        assert ": 3, 4" in result.warnings[0]

    def test_rounding_tolerance(self):
        """Test that sub-point differences are ignored."""
        result = GeometryValidator.check_uniform_page_sizes([(595.28, 841.89), (595.0, 842.0)])
        assert not result.warnings

    def test_empty_page_sizes(self):
        """Test that an empty list has nothing to report."""
        assert not GeometryValidator.check_uniform_page_sizes([]).has_issues()


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_add_error(self):
        """Test adding an error marks result as invalid."""
        result = ValidationResult(is_valid=True)
        result.add_error("Test error")

        assert not result.is_valid
        assert "Test error" in result.errors

    def test_add_warning(self):
        """Test adding a warning doesn't mark result as invalid."""
        result = ValidationResult(is_valid=True)
        result.add_warning("Test warning")

        assert result.is_valid
        assert result.has_issues()

    def test_get_summary_no_issues(self):
        """Test summary with no issues."""
        result = ValidationResult(is_valid=True)

        assert "passed" in result.get_summary().lower()

    def test_get_summary_with_issues(self):
        """Test summary with errors and warnings."""
        result = ValidationResult(is_valid=True)
        result.add_error("Error 1")
        result.add_warning("Warning 1")
        result.add_warning("Warning 2")

        assert "1 error(s)" in result.get_summary()
        assert "2 warning(s)" in result.get_summary()
