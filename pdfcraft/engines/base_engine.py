"""Base rendering engine interface.

This module defines the abstract base class every engine adapter
implements. An adapter owns one third-party engine instance and
translates the builder's engine-agnostic calls into that engine's own
conventions.
"""

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel

from pdfcraft.models.paper_config import PaperConfig
from pdfcraft.models.pdf_result import PdfResult

logger = logging.getLogger(__name__)


class RenderingEngine(ABC):
    """Base class for rendering engine adapters.

    Subclasses translate each operation into calls on the engine they
    wrap. All state (pages, buffered HTML, resolution) lives in the
    wrapped engine or in the adapter; nothing is shared between adapters.

    Attributes:
        name: Engine name as accepted by the builder (must be implemented
            by subclasses)
    """

    options_model: type[BaseModel]

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the engine name."""
        pass

    @abstractmethod
    def init_page(self, paper: PaperConfig) -> None:
        """Start a new page laid out on the given paper.

        Args:
            paper: Validated paper configuration
        """
        pass

    @abstractmethod
    def write_html(self, html: str) -> None:
        """Append an HTML fragment to the document.

        Args:
            html: HTML fragment or complete document
        """
        pass

    @abstractmethod
    def set_resolution(self, dpi: int) -> None:
        """Set the image resolution used when rendering.

        Args:
            dpi: Dots per inch, already validated by the caller
        """
        pass

    @abstractmethod
    def output_bytes(self) -> bytes:
        """Return the finished document as PDF bytes."""
        pass

    @abstractmethod
    def output_file(self, path: Path) -> bool:
        """Write the finished document to a file.

        Args:
            path: Destination file path

        Returns:
            True once the file is written

        Raises:
            OSError: If the file cannot be written
        """
        pass

    def set_display_mode(self, mode: str) -> None:
        """Set the initial viewer display mode.

        Engines without a display mode ignore the call.
        """
        pass

    def stream_to_client(self, filename: str, target: BinaryIO | None = None) -> None:
        """Deliver the finished document as a client download.

        Writes download headers, a blank line and the PDF bytes to
        ``target`` (standard output when not given, CGI style).

        Args:
            filename: Suggested download filename
            target: Binary stream to write to
        """
        result = PdfResult(pdf_bytes=self.output_bytes(), filename=filename)
        stream = target if target is not None else sys.stdout.buffer

        head = "".join(f"{key}: {value}\r\n" for key, value in result.headers.items())
        stream.write(head.encode("latin-1", errors="replace") + b"\r\n")
        stream.write(result.pdf_bytes)
        stream.flush()

        logger.debug(f"Streamed {filename} ({len(result)} bytes)")
