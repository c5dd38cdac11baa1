"""
Service layer for the booklet imposer.

Services coordinate high-level operations around the imposition engine:
reading and writing PDFs, and running single-file or batch jobs.
"""

from .booklet_service import BookletService
from .pdf_service import PdfService

__all__ = ['BookletService', 'PdfService']
