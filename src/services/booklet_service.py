"""
Booklet Service - High-level booklet generation operations.

This service runs the load, impose, render and save pipeline for one
document, and drives it over a whole directory in batch mode.
"""

from pathlib import Path
from typing import List, Optional

from ..config import OUTPUT_SUFFIX, PDF_EXTENSION
from ..exceptions import BookletError, UsageError
from ..imposition import impose, normalize_page_count
from ..models import BatchResult, DocumentResult, ImpositionConfig
from ..validators import GeometryValidator
from .pdf_service import PdfService


class BookletService:
    """
    High-level service for booklet operations.

    Coordinates the imposition engine with the PDF service and reports
    progress on the console.
    """

    def __init__(self, pdf_service: Optional[PdfService] = None):
        self.pdf_service = pdf_service or PdfService()

    @staticmethod
    def output_path_for(input_path: Path, output_dir: Path) -> Path:
        """
        Build the batch-mode output path for a source file.

        Example:
            >>> BookletService.output_path_for(Path('in/Zine.PDF'), Path('out'))
            PosixPath('out/Zine-booklet.pdf')
        """
        return output_dir / f"{input_path.stem}{OUTPUT_SUFFIX}{PDF_EXTENSION}"

    @staticmethod
    def find_sources(input_dir: Path) -> List[Path]:
        """
        List PDF files in a directory.

        Matches the .pdf extension case-insensitively and sorts by name so
        batch runs are reproducible.
        """
        return sorted(
            path for path in input_dir.iterdir()
            if path.is_file() and path.suffix.lower() == PDF_EXTENSION
        )

    def create_booklet(
        self,
        input_path: Path,
        output_path: Path,
        config: ImpositionConfig
    ) -> DocumentResult:
        """
        Impose a single PDF into a saddle-stitch booklet.

        Args:
            input_path: Source PDF
            output_path: Destination PDF
            config: Imposition configuration

        Returns:
            DocumentResult for the written booklet

        Raises:
            LoadError: If the source cannot be read
            GeometryError: If the source pages cannot be laid out
            WriteError: If the output cannot be written
        """
        print(f"Input PDF: {input_path.name}")
        reader = self.pdf_service.load(input_path)

        page_count = len(reader.pages)
        page_size = self.pdf_service.page_size(reader)
        print(f"  Pages: {page_count} (padded to {normalize_page_count(page_count)})")

        size_check = GeometryValidator.check_uniform_page_sizes(self.pdf_service.page_sizes(reader))
        for warning in size_check.warnings:
            print(f"  Warning: {warning}")

        sides = impose(page_count, page_size, config)
        sheet_count = len(sides) // 2
        blank_sides = sum(1 for side in sides if side.is_blank())
        print(f"  Sheets: {sheet_count}, Sides: {len(sides)} ({blank_sides} blank)")

        writer = self.pdf_service.render(reader, sides)
        self.pdf_service.save(writer, output_path)
        print(f"  Created: {output_path}")

        return DocumentResult(source=input_path, output=output_path, sheet_count=sheet_count)

    def process_batch(
        self,
        input_dir: Path,
        output_dir: Path,
        config: ImpositionConfig
    ) -> BatchResult:
        """
        Impose every PDF in a directory.

        Documents are processed one at a time. A failing document is
        recorded in the result and the loop moves on to the next one.

        Args:
            input_dir: Directory holding the source PDFs
            output_dir: Existing directory receiving <name>-booklet.pdf files
            config: Imposition configuration shared by every document

        Returns:
            BatchResult with one DocumentResult per source file

        Raises:
            UsageError: If output_dir is not an existing directory
        """
        if not output_dir.is_dir():
            raise UsageError(f"In batch mode, output path must be a directory: {output_dir}")

        batch = BatchResult()
        sources = self.find_sources(input_dir)
        print(f"Found {len(sources)} PDF file(s) in {input_dir}\n")

        for source in sources:
            output_path = self.output_path_for(source, output_dir)
            try:
                batch.add(self.create_booklet(source, output_path, config))
            except BookletError as e:
                print(f"  Error: {e}")
                batch.add(DocumentResult(source=source, succeeded=False, error=str(e)))
            print()

        print(f"Batch complete: {batch.get_summary()}")
        for failure in batch.failed:
            print(f"  - {failure.source.name}: {failure.error}")

        return batch
