"""pdfcraft: one fluent API over several HTML-to-PDF engines.

Pick an engine, configure paper and resolution, load HTML (optionally
with CSS) and render to bytes, a file or a client download.
"""

from pdfcraft.builder import DocumentBuilder
from pdfcraft.engines import SUPPORTED_ENGINES
from pdfcraft.exceptions import (
    InvalidConfiguration,
    PdfCraftError,
    RenderFailure,
    StyleSheetError,
)

__version__ = "1.0.0"

__all__ = [
    "DocumentBuilder",
    "SUPPORTED_ENGINES",
    "PdfCraftError",
    "InvalidConfiguration",
    "RenderFailure",
    "StyleSheetError",
]
