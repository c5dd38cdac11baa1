"""
Saddle-stitch imposition engine.

Maps logical page indices onto (sheet, side, slot, position, scale) for a
2-up booklet. Pure functions only: no PDF library, no I/O. The output is
consumed by the PDF service which draws each placement.

Sheet order for a booklet of N (padded) pages, one iteration per sheet:

    back:  [N-1-i | i    ]
    front: [i+1   | N-2-i]     i = 0, 2, 4, ...

Print all sides in order double-sided, fold the stack in half, and the
pages read 0..N-1.
"""

from typing import List, Tuple

from .config import PAGES_PER_SHEET
from .exceptions import GeometryError
from .models import (
    ImpositionConfig,
    PlacementInstruction,
    SheetSide,
    Side,
    Slot,
    StackPosition,
)
from .validators import GeometryValidator


def normalize_page_count(page_count: int) -> int:
    """
    Round the page count up to the next multiple of 4.

    Args:
        page_count: Number of pages in the source document (>= 1)

    Returns:
        Smallest multiple of 4 that is >= page_count

    Examples:
        4 -> 4
        5 -> 8
        13 -> 16
    """
    if page_count < 1:
        raise GeometryError(f"Document must have at least one page, got {page_count}")
    return ((page_count + PAGES_PER_SHEET - 1) // PAGES_PER_SHEET) * PAGES_PER_SHEET


def compute_scale(
    page_size: Tuple[float, float],
    sheet_size: Tuple[float, float],
    padding: float = 0.0,
    double_print: bool = False
) -> float:
    """
    Calculate the uniform scale factor applied to every source page.

    A page must fit in half the sheet width minus padding on both sides.
    Vertically it gets the full sheet height, or half of it when pages are
    double-printed, again minus padding on both sides.

    Args:
        page_size: (width, height) of the source page in points
        sheet_size: (width, height) of the landscape output sheet
        padding: Gap in points around each placed page
        double_print: Stack two copies of each page vertically

    Returns:
        min(horizontal fit, vertical fit), always > 0

    Raises:
        GeometryError: If dimensions are non-positive or padding leaves no room
    """
    orig_width, orig_height = page_size
    sheet_width, sheet_height = sheet_size

    if not (orig_width > 0 and orig_height > 0):
        raise GeometryError(f"Page dimensions must be positive, got {orig_width}x{orig_height}")

    slot_height = sheet_height / 2 if double_print else sheet_height

    scale_x = (sheet_width / 2 - padding * 2) / orig_width
    scale_y = (slot_height - padding * 2) / orig_height
    scale = min(scale_x, scale_y)

    if not scale > 0:
        raise GeometryError(
            f"Padding {padding} is too large for a {sheet_width:.1f}x{sheet_height:.1f}pt sheet"
        )

    return scale


def sheet_page_indices(index: int, final_page_count: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """
    Logical page indices for one sheet.

    Args:
        index: Iteration step (0, 2, 4, ...), twice the sheet index
        final_page_count: Normalized page count (multiple of 4)

    Returns:
        ((back_left, back_right), (front_left, front_right))
    """
    back = (final_page_count - 1 - index, index)
    front = (index + 1, final_page_count - 2 - index)
    return back, front


def _place_slot(
    page_index: int,
    sheet_index: int,
    side: Side,
    slot: Slot,
    sheet_size: Tuple[float, float],
    scaled_size: Tuple[float, float],
    config: ImpositionConfig
) -> List[PlacementInstruction]:
    sheet_width, sheet_height = sheet_size
    width, height = scaled_size

    x = (0 if slot is Slot.LEFT else sheet_width / 2) + config.padding
    stamps = [(StackPosition.BOTTOM, config.padding)]
    if config.double_print:
        stamps.append((StackPosition.TOP, sheet_height / 2 + config.padding))

    return [
        PlacementInstruction(
            source_page_index=page_index,
            sheet_index=sheet_index,
            side=side,
            slot=slot,
            stack_position=position,
            x=x,
            y=y,
            width=width,
            height=height,
        )
        for position, y in stamps
    ]


def impose(
    page_count: int,
    page_size: Tuple[float, float],
    config: ImpositionConfig
) -> List[SheetSide]:
    """
    Compute the complete booklet layout for a document.

    Args:
        page_count: Number of pages in the source document
        page_size: (width, height) of the first page; all pages are
            assumed to share it
        config: Imposition configuration

    Returns:
        Output sides in print order: back of sheet 0, front of sheet 0,
        back of sheet 1, ... Each side lists its placements left slot
        first, bottom stamp before top stamp. Blank padding pages produce
        no placement.

    Raises:
        GeometryError: If page count, page size or padding are invalid
    """
    validation = GeometryValidator.validate_geometry(page_count, page_size, config)
    if not validation.is_valid:
        raise GeometryError("; ".join(validation.errors))

    final_page_count = normalize_page_count(page_count)
    sheet_size = config.resolve_sheet_size()
    scale = compute_scale(page_size, sheet_size, config.padding, config.double_print)
    scaled_size = (page_size[0] * scale, page_size[1] * scale)

    sides = []
    for index in range(0, final_page_count // 2, 2):
        sheet_index = index // 2
        back, front = sheet_page_indices(index, final_page_count)

        for side, (left, right) in ((Side.BACK, back), (Side.FRONT, front)):
            placements = []
            for slot, page_index in ((Slot.LEFT, left), (Slot.RIGHT, right)):
                # Padding pages beyond the source stay empty
                if page_index < page_count:
                    placements.extend(_place_slot(
                        page_index, sheet_index, side, slot, sheet_size, scaled_size, config
                    ))
            sides.append(SheetSide(
                sheet_index=sheet_index,
                side=side,
                width=sheet_size[0],
                height=sheet_size[1],
                placements=tuple(placements),
            ))

    return sides
