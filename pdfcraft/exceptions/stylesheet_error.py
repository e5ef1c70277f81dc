"""Stylesheet error exception.

This module defines the StyleSheetError exception raised by the style
merger when supplied CSS cannot be parsed.
"""

from pdfcraft.exceptions.base import PdfCraftError


class StyleSheetError(PdfCraftError, ValueError):
    """Raised when raw CSS text contains parse errors.
    
    The builder does not translate this error; it reaches the caller as
    raised by the style merger.
    """
    
    pass
