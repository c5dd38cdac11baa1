"""
Saddle-stitch booklet imposer.

Core imposition engine plus the services that read source PDFs and write
imposed booklets.
"""

__version__ = "1.0.0"
