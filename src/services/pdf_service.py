"""
PDF Service - Loads source documents and renders imposed sheets.

This is the only module that talks to pypdf. The imposition engine hands
it a list of SheetSide records and it draws each placement onto a new
blank page.
"""

from pathlib import Path
from typing import List, Sequence, Tuple

from pypdf import PdfReader, PdfWriter, PageObject, Transformation
from pypdf.errors import PyPdfError

from ..exceptions import LoadError, WriteError
from ..models import SheetSide


class PdfService:
    """
    Document-model collaborator backed by pypdf.

    Loading, page embedding, drawing and serialization all go through
    here so the rest of the package stays format-agnostic.
    """

    def load(self, pdf_path: Path) -> PdfReader:
        """
        Open a source PDF.

        Args:
            pdf_path: Path to the source PDF file

        Returns:
            PdfReader with at least one page

        Raises:
            LoadError: If the file is missing, unreadable, corrupt or empty
        """
        if not pdf_path.is_file():
            raise LoadError(f"PDF file not found: {pdf_path}")

        try:
            reader = PdfReader(str(pdf_path))
            page_count = len(reader.pages)
        except (PyPdfError, OSError, ValueError, KeyError) as e:
            raise LoadError(f"Failed to read {pdf_path.name}: {e}") from e

        if page_count == 0:
            raise LoadError(f"{pdf_path.name} has no pages")

        # A broken first page is a load failure, not a layout failure
        self.page_size(reader)

        return reader

    @staticmethod
    def page_size(reader: PdfReader, page_index: int = 0) -> Tuple[float, float]:
        """
        Return (width, height) of a page's MediaBox in points.

        Raises:
            LoadError: If the MediaBox is missing or malformed
        """
        try:
            box = reader.pages[page_index].mediabox
            return float(box.width), float(box.height)
        except (PyPdfError, ValueError, KeyError, TypeError, IndexError) as e:
            raise LoadError(f"Invalid MediaBox on page {page_index + 1}: {e}") from e

    def page_sizes(self, reader: PdfReader) -> List[Tuple[float, float]]:
        """Return (width, height) of every page, in order."""
        return [self.page_size(reader, i) for i in range(len(reader.pages))]

    def render(self, reader: PdfReader, sides: Sequence[SheetSide]) -> PdfWriter:
        """
        Draw every sheet side onto a new document.

        Each side becomes one blank page of the side's size. Every placement
        is merged with a transformation that moves the source MediaBox
        origin to (0, 0), scales the page to the placement size, and
        translates it to the placement position.

        Args:
            reader: Source document
            sides: Sheet sides in output order

        Returns:
            PdfWriter holding one page per side
        """
        writer = PdfWriter()

        for side in sides:
            sheet = PageObject.create_blank_page(width=side.width, height=side.height)

            for placement in side.placements:
                try:
                    source = reader.pages[placement.source_page_index]
                    box = source.mediabox
                    scale_x = placement.width / float(box.width)
                    scale_y = placement.height / float(box.height)

                    transform = (
                        Transformation()
                        .translate(-float(box.left), -float(box.bottom))
                        .scale(scale_x, scale_y)
                        .translate(placement.x, placement.y)
                    )
                    sheet.merge_transformed_page(source, transform)
                except (PyPdfError, KeyError, ValueError, ZeroDivisionError) as e:
                    raise LoadError(
                        f"Failed to embed page {placement.source_page_index + 1}: {e}"
                    ) from e

            writer.add_page(sheet)

        return writer

    def save(self, writer: PdfWriter, output_path: Path) -> Path:
        """
        Serialize the rendered document.

        Raises:
            WriteError: If the output file cannot be written
        """
        try:
            with open(output_path, "wb") as f:
                writer.write(f)
        except OSError as e:
            raise WriteError(f"Failed to write {output_path}: {e}") from e

        return output_path
