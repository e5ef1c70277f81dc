"""Render failure exception.

This module defines the RenderFailure exception raised when the
underlying engine fails while producing the finished document.
"""

from pdfcraft.exceptions.base import PdfCraftError


class RenderFailure(PdfCraftError):
    """Raised when the rendering engine fails to produce a document.
    
    The engine's own exception is kept in ``cause`` (and chained as
    ``__cause__``) so engine-specific error types never reach the caller.
    
    Attributes:
        cause: The exception raised by the rendering engine, if any
    """
    
    def __init__(
        self,
        message: str,
        context: dict | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.cause = cause
