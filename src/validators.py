"""
Precondition checks for booklet imposition.

This module contains the validation logic run before any geometry is
computed. Validators collect every problem into a ValidationResult so the
caller can report all of them at once instead of failing on the first.
"""

from typing import List, Tuple
from .models import ImpositionConfig, ValidationResult


class GeometryValidator:
    """Validates page counts, page sizes and sheet geometry."""

    @staticmethod
    def validate_page_count(page_count: int) -> ValidationResult:
        """
        Validate the number of source pages.

        Args:
            page_count: Number of pages in the source document

        Returns:
            ValidationResult with an error if there are no pages
        """
        result = ValidationResult(is_valid=True)

        if page_count < 1:
            result.add_error(f"Document must have at least one page, got {page_count}")

        return result

    @staticmethod
    def validate_page_size(page_size: Tuple[float, float]) -> ValidationResult:
        """
        Validate the source page dimensions.

        Args:
            page_size: (width, height) of the first source page in points

        Returns:
            ValidationResult with an error for each non-positive dimension
        """
        result = ValidationResult(is_valid=True)
        width, height = page_size

        if not width > 0:
            result.add_error(f"Page width must be positive, got {width}")
        if not height > 0:
            result.add_error(f"Page height must be positive, got {height}")

        return result

    @staticmethod
    def validate_geometry(
        page_count: int,
        page_size: Tuple[float, float],
        config: ImpositionConfig
    ) -> ValidationResult:
        """
        Validate everything the imposition engine relies on.

        Checks the page count and page size, then makes sure the padding
        leaves a positive area in every slot of the resolved sheet.

        Args:
            page_count: Number of pages in the source document
            page_size: (width, height) of the first source page
            config: Imposition configuration

        Returns:
            ValidationResult combining all errors found

        Example:
            >>> config = ImpositionConfig(padding=500)
            >>> result = GeometryValidator.validate_geometry(4, (595, 842), config)
            >>> result.is_valid
            False
        """
        result = ValidationResult(is_valid=True)

        for partial in (
            GeometryValidator.validate_page_count(page_count),
            GeometryValidator.validate_page_size(page_size),
        ):
            for error in partial.errors:
                result.add_error(error)

        sheet_width, sheet_height = config.resolve_sheet_size()
        slot_width = sheet_width / 2
        slot_height = sheet_height / 2 if config.double_print else sheet_height

        if not slot_width - config.padding * 2 > 0:
            result.add_error(
                f"Padding {config.padding} leaves no horizontal space in a {slot_width:.1f}pt wide slot"
            )
        if not slot_height - config.padding * 2 > 0:
            result.add_error(
                f"Padding {config.padding} leaves no vertical space in a {slot_height:.1f}pt high slot"
            )

        return result

    @staticmethod
    def check_uniform_page_sizes(page_sizes: List[Tuple[float, float]]) -> ValidationResult:
        """
        Check that every page shares the first page's size.

        The engine scales every page with the factor computed from page 0,
        so differently sized pages are still placed but may overflow or
        leave gaps. This is reported as a warning, never an error.

        Args:
            page_sizes: (width, height) of every source page, in order

        Returns:
            ValidationResult with a warning listing mismatched pages (1-indexed)
        """
        result = ValidationResult(is_valid=True)

        if not page_sizes:
            return result

        first_width, first_height = page_sizes[0]
        mismatched = [
            i + 1 for i, (width, height) in enumerate(page_sizes)
            if round(width) != round(first_width) or round(height) != round(first_height)
        ]

        if mismatched:
            shown = ", ".join(str(p) for p in mismatched[:10])
            if len(mismatched) > 10:
                shown += ", ..."
            result.add_warning(
                f"{len(mismatched)} page(s) differ in size from page 1 "
                f"({first_width:.0f}x{first_height:.0f}pt) and will use its scale: {shown}"
            )

        return result
