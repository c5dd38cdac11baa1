"""
Data models for the booklet imposer.

This module defines typed dataclasses for the imposition configuration,
the placement instructions produced by the engine, and the per-document
results collected by the batch driver.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
from enum import Enum

from .config import SHEET_SIZES, DEFAULT_SHEET_SIZE, LARGE_SHEET_SIZE


class Side(Enum):
    """Printed side of a physical sheet."""
    FRONT = "front"
    BACK = "back"


class Slot(Enum):
    """Half of a sheet side a page is placed into."""
    LEFT = "left"
    RIGHT = "right"


class StackPosition(Enum):
    """Vertical stamp position inside a slot (TOP is only used for double-print)."""
    BOTTOM = "bottom"
    TOP = "top"


@dataclass(frozen=True)
class ImpositionConfig:
    """
    Configuration for booklet imposition.

    Either an explicit landscape sheet_size is given, or one of the presets
    is picked through use_large_sheet. The two are mutually exclusive.
    """
    sheet_size: Optional[Tuple[float, float]] = None
    padding: float = 0.0
    double_print: bool = False
    use_large_sheet: bool = False

    def __post_init__(self):
        """Validate options."""
        if not math.isfinite(self.padding) or self.padding < 0:
            raise ValueError(f"padding must be a finite number >= 0, got {self.padding}")
        if self.sheet_size is not None:
            if self.use_large_sheet:
                raise ValueError("sheet_size and use_large_sheet are mutually exclusive")
            if len(self.sheet_size) != 2 or not all(math.isfinite(d) and d > 0 for d in self.sheet_size):
                raise ValueError(f"sheet_size must be two positive dimensions, got {self.sheet_size}")

    def resolve_sheet_size(self) -> Tuple[float, float]:
        """Return the (width, height) of the output sheet in points."""
        if self.sheet_size is not None:
            width, height = self.sheet_size
            return float(width), float(height)
        preset = LARGE_SHEET_SIZE if self.use_large_sheet else DEFAULT_SHEET_SIZE
        return SHEET_SIZES[preset]


@dataclass(frozen=True)
class PlacementInstruction:
    """
    Where one source page is drawn on an output sheet side.

    Coordinates are PDF points with the origin at the bottom-left corner
    of the sheet; width/height are the already-scaled page dimensions.
    """
    source_page_index: int
    sheet_index: int
    side: Side
    slot: Slot
    stack_position: StackPosition
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class SheetSide:
    """One side of a physical sheet, i.e. one page of the output document."""
    sheet_index: int
    side: Side
    width: float
    height: float
    placements: Tuple[PlacementInstruction, ...] = ()

    def is_blank(self) -> bool:
        """Check if nothing is drawn on this side."""
        return not self.placements

    def pages(self) -> List[int]:
        """Source page indices drawn on this side, in placement order."""
        return [p.source_page_index for p in self.placements]


@dataclass
class ValidationResult:
    """
    Result of validation checks.

    Contains validation status, errors, and warnings that can be
    displayed to the user.
    """
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message and mark as invalid."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_issues(self) -> bool:
        """Check if there are any errors or warnings."""
        return len(self.errors) > 0 or len(self.warnings) > 0

    def get_summary(self) -> str:
        """Get a human-readable summary of validation results."""
        if self.is_valid and not self.warnings:
            return "Validation passed with no issues"

        parts = []
        if self.errors:
            parts.append(f"{len(self.errors)} error(s)")
        if self.warnings:
            parts.append(f"{len(self.warnings)} warning(s)")

        return ", ".join(parts)

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, {self.get_summary()})"


@dataclass
class DocumentResult:
    """Outcome of imposing a single source document."""
    source: Path
    output: Optional[Path] = None
    succeeded: bool = True
    error: str = ""
    sheet_count: int = 0

    def __repr__(self):
        status = "ok" if self.succeeded else f"failed: {self.error}"
        return f"DocumentResult('{self.source.name}', {status})"


@dataclass
class BatchResult:
    """
    Per-document outcomes of a batch run.

    Failures are collected here instead of propagating, so one bad input
    never stops the remaining documents.
    """
    results: List[DocumentResult] = field(default_factory=list)

    def add(self, result: DocumentResult):
        """Record the outcome of one document."""
        self.results.append(result)

    @property
    def succeeded(self) -> List[DocumentResult]:
        return [r for r in self.results if r.succeeded]

    @property
    def failed(self) -> List[DocumentResult]:
        return [r for r in self.results if not r.succeeded]

    def all_succeeded(self) -> bool:
        """Check if every processed document produced an output."""
        return not self.failed

    def get_summary(self) -> str:
        """Get a human-readable summary of the batch run."""
        if not self.results:
            return "No PDF files found"
        return f"{len(self.succeeded)} succeeded, {len(self.failed)} failed"
