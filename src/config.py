"""
Centralized configuration and constants for the booklet imposer.

Sheet presets, output naming and other fixed values live here so the
engine and services never hardcode them.
"""

from typing import Dict, Tuple

from reportlab.lib.pagesizes import A3, A4, landscape


# Output sheet sizes in points (72 points per inch) - (width, height) in landscape
SHEET_SIZES: Dict[str, Tuple[float, float]] = {
    'a4': landscape(A4),    # 841.9 x 595.3 pt
    'a3': landscape(A3),    # 1190.6 x 841.9 pt
}

DEFAULT_SHEET_SIZE = 'a4'
LARGE_SHEET_SIZE = 'a3'

# Logical pages carried by one physical sheet (2 per side)
PAGES_PER_SHEET = 4

# Batch mode naming
PDF_EXTENSION = '.pdf'
OUTPUT_SUFFIX = '-booklet'
