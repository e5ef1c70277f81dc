"""Base exception class for all pdfcraft errors.

This module defines the PdfCraftError class that serves as the base
for all custom exceptions in the package. Callers can catch the whole
hierarchy with a single except clause.
"""


class PdfCraftError(Exception):
    """Base exception for all pdfcraft errors.
    
    Attributes:
        message: Error message describing what went wrong
        context: Optional dictionary with additional error context
    """
    
    def __init__(
        self,
        message: str,
        context: dict | None = None
    ) -> None:
        """Initialize base pdfcraft error.
        
        Args:
            message: Human-readable error message
            context: Optional dictionary with additional error context
                (e.g., the rejected value, the selected engine)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        return self.message
    
    def __repr__(self) -> str:
        """Return detailed representation of the error.
        
        Returns:
            Detailed error representation including context
        """
        context_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{context_str})"
