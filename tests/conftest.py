"""
Pytest configuration and fixtures.
"""

import pytest
from pathlib import Path
from reportlab.pdfgen import canvas


def write_pdf(path: Path, page_count: int, page_size=(200, 300)) -> Path:
    """Write a PDF whose pages each carry their 1-indexed number."""
    c = canvas.Canvas(str(path), pagesize=page_size)
    for page_num in range(1, page_count + 1):
        c.drawString(20, 20, f"Page {page_num}")
        c.showPage()
    c.save()
    return path


@pytest.fixture
def make_pdf(tmp_path):
    """Factory creating source PDFs in the test's temp directory."""
    def _make(name: str = "source.pdf", page_count: int = 4, page_size=(200, 300)) -> Path:
        return write_pdf(tmp_path / name, page_count, page_size)
    return _make


@pytest.fixture
def corrupt_pdf(tmp_path):
    """A .pdf file that cannot be parsed."""
    path = tmp_path / "corrupt.pdf"
    path.write_bytes(b"")
    return path


@pytest.fixture
def small_sheet():
    """Sheet size with round numbers for exact geometry checks."""
    return (1000.0, 500.0)


@pytest.fixture
def portrait_page():
    """Source page size matching half of small_sheet at scale 1.0 vertically."""
    return (400.0, 500.0)


@pytest.fixture
def make_broken_mediabox_pdf(make_pdf):
    """Factory creating a PDF whose /MediaBox is not a four-number array."""
    def _make(name: str = "broken.pdf") -> Path:
        path = make_pdf(name, page_count=2, page_size=(200, 300))
        data = path.read_bytes()
        original = b"/MediaBox [ 0 0 200 300 ]"
        assert original in data
        # Same length keeps the xref offsets valid
        path.write_bytes(data.replace(original, b"/MediaBox [ 0 0 abc ]".ljust(len(original))))
        return path
    return _make
