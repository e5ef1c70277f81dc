"""Data models for pdfcraft.

This package contains:
- PaperConfig: Page format, orientation and custom size
- WeasyPrintOptions / FpdfOptions: Engine construction options
- PdfResult: Rendered bytes plus download metadata
"""

from pdfcraft.models.engine_options import FpdfOptions, WeasyPrintOptions
from pdfcraft.models.paper_config import (
    SUPPORTED_FORMATS,
    SUPPORTED_ORIENTATIONS,
    PaperConfig,
)
from pdfcraft.models.pdf_result import PdfResult

__all__ = [
    "PaperConfig",
    "SUPPORTED_FORMATS",
    "SUPPORTED_ORIENTATIONS",
    "WeasyPrintOptions",
    "FpdfOptions",
    "PdfResult",
]
