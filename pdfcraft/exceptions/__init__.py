"""Custom exception classes for pdfcraft.

This package contains the exception hierarchy:
- PdfCraftError: Base exception for all pdfcraft errors
- InvalidConfiguration: Raised when a builder option is invalid
- RenderFailure: Raised when the engine fails to render
- StyleSheetError: Raised when supplied CSS cannot be parsed
"""

from pdfcraft.exceptions.base import PdfCraftError
from pdfcraft.exceptions.invalid_configuration import InvalidConfiguration
from pdfcraft.exceptions.render_failure import RenderFailure
from pdfcraft.exceptions.stylesheet_error import StyleSheetError

__all__ = [
    "PdfCraftError",
    "InvalidConfiguration",
    "RenderFailure",
    "StyleSheetError",
]
