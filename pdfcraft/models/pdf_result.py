"""Rendered document container.

Holds finished PDF bytes together with the metadata needed to hand them
to a client as a download.
"""

from dataclasses import dataclass


@dataclass
class PdfResult:
    """
    Result of a render operation.

    Contains the PDF bytes and metadata for HTTP responses.
    """

    pdf_bytes: bytes
    filename: str = "document.pdf"
    content_type: str = "application/pdf"

    def __len__(self) -> int:
        """Return the size of PDF in bytes"""
        return len(self.pdf_bytes)

    @property
    def headers(self) -> dict[str, str]:
        """Response headers offering the document as a download."""
        safe_name = self.filename.replace("\\", "_").replace('"', "_")
        return {
            "Content-Type": self.content_type,
            "Content-Disposition": f'attachment; filename="{safe_name}"',
            "Content-Length": str(len(self.pdf_bytes)),
        }
