"""Invalid configuration exception.

This module defines the InvalidConfiguration exception raised when a
builder option is out of range or malformed: an unsupported engine name,
an unsupported paper format, missing custom dimensions or an
out-of-range DPI.
"""

from pdfcraft.exceptions.base import PdfCraftError


class InvalidConfiguration(PdfCraftError, ValueError):
    """Raised when a builder option fails validation.
    
    Always raised before the underlying engine is touched, so a failed
    call leaves the document exactly as it was.
    """
    
    pass
