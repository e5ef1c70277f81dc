"""Document builder façade.

This module provides DocumentBuilder, a fluent wrapper around one of the
supported HTML-to-PDF engines. Every configuration call validates its
input, forwards it to the owned engine and returns the same builder so
calls can be chained.

Example:
    ```python
    from pdfcraft import DocumentBuilder

    pdf_bytes = (
        DocumentBuilder("weasyprint")
        .set_paper("A4", "portrait")
        .set_dpi(300)
        .load_html("<h1>Hello World</h1>", "h1 { color: blue; }")
        .render()
    )
    ```
"""

import logging
from pathlib import Path
from typing import Any, BinaryIO

from pydantic import ValidationError

from pdfcraft.config import get_config
from pdfcraft.engines import SUPPORTED_ENGINES, RenderingEngine, create_engine
from pdfcraft.exceptions.invalid_configuration import InvalidConfiguration
from pdfcraft.exceptions.render_failure import RenderFailure
from pdfcraft.models.paper_config import PaperConfig
from pdfcraft.models.pdf_result import PdfResult
from pdfcraft.styles.stylesheet import merge_css

logger = logging.getLogger(__name__)

MIN_DPI = 72
MAX_DPI = 300
PDF_SIGNATURE = b"%PDF-"


def _invalid_configuration(error: ValidationError, context: dict[str, Any]) -> InvalidConfiguration:
    """Translate a Pydantic validation error into InvalidConfiguration.

    Messages raised by our own validators are passed through unchanged;
    Pydantic's built-in messages are prefixed with the offending field.
    """
    first = error.errors(include_url=False)[0]
    cause = first.get("ctx", {}).get("error")
    if cause is not None:
        message = str(cause)
    else:
        location = ".".join(str(part) for part in first["loc"])
        message = f"{location}: {first['msg']}" if location else first["msg"]
    return InvalidConfiguration(message, context=context)


class DocumentBuilder:
    """Fluent builder producing one PDF document with a chosen engine.

    The engine is selected once, at construction, and owned by the
    builder for its whole lifetime. A builder is meant for a single
    document and a single thread.

    Attributes:
        engine: The owned rendering engine adapter
    """

    def __init__(
        self,
        engine: str | None = None,
        config: dict[str, Any] | None = None,
    ) -> None:
        """Select and initialise the rendering engine.

        Args:
            engine: Engine name, one of SUPPORTED_ENGINES. If not provided,
                uses get_config().default_engine
            config: Optional engine options merged over the engine's
                defaults (caller values win)

        Raises:
            InvalidConfiguration: If the engine name or options are invalid
        """
        engine_name = engine if engine is not None else get_config().default_engine
        if engine_name not in SUPPORTED_ENGINES:
            raise InvalidConfiguration(
                f"Engine must be one of: {', '.join(SUPPORTED_ENGINES)}",
                context={"engine": engine_name},
            )

        try:
            self._engine = create_engine(engine_name, config)
        except ValidationError as e:
            raise _invalid_configuration(
                e, {"engine": engine_name, "config": dict(config or {})}
            ) from e

        self._selected_engine = engine_name
        logger.debug(f"Document builder created with engine: {engine_name}")

    @property
    def engine(self) -> RenderingEngine:
        return self._engine

    def get_engine(self) -> str:
        """Return the engine name chosen at construction."""
        return self._selected_engine

    def set_paper(
        self,
        format: str = "A4",
        orientation: str = "portrait",
        custom_size: tuple[float, float] | list[float] | None = None,
    ) -> "DocumentBuilder":
        """Start a new page with the given paper format and orientation.

        Args:
            format: One of A4, A3, LETTER, LEGAL or CUSTOM
            orientation: "portrait" or "landscape"
            custom_size: (width, height) in millimetres, required with CUSTOM
                and ignored otherwise

        Returns:
            This builder

        Raises:
            InvalidConfiguration: If the format, orientation or custom size
                is invalid
        """
        try:
            paper = PaperConfig(
                format=format,
                orientation=orientation,
                custom_size=custom_size if format == "CUSTOM" else None,
            )
        except ValidationError as e:
            raise _invalid_configuration(
                e,
                {"format": format, "orientation": orientation, "custom_size": custom_size},
            ) from e

        self._engine.set_display_mode("fullpage")
        self._engine.init_page(paper)
        logger.debug(f"Page added: {paper.format} {paper.orientation}")
        return self

    def set_dpi(self, dpi: int) -> "DocumentBuilder":
        """Set the image resolution.

        Args:
            dpi: Dots per inch, between 72 and 300 inclusive

        Returns:
            This builder

        Raises:
            InvalidConfiguration: If dpi is not an integer in range
        """
        if isinstance(dpi, bool) or not isinstance(dpi, int):
            raise InvalidConfiguration(
                f"DPI must be an integer, got {type(dpi).__name__}",
                context={"dpi": dpi},
            )
        if dpi < MIN_DPI or dpi > MAX_DPI:
            raise InvalidConfiguration(
                f"DPI must be between {MIN_DPI} and {MAX_DPI}",
                context={"dpi": dpi},
            )

        self._engine.set_resolution(dpi)
        return self

    def load_html(self, html: str, css: str | None = None) -> "DocumentBuilder":
        """Append HTML content, optionally styled with raw CSS.

        Args:
            html: HTML fragment or document
            css: Optional CSS text, parsed and embedded ahead of the HTML

        Returns:
            This builder

        Raises:
            StyleSheetError: If the CSS cannot be parsed
        """
        self._engine.write_html(merge_css(html, css))
        return self

    def render(self, output_path: str | Path | None = None) -> bytes | bool:
        """Render the finished document.

        Args:
            output_path: Optional file path. If given, the document is
                written there; otherwise its bytes are returned.

        Returns:
            True when written to a file, otherwise the PDF bytes

        Raises:
            OSError: If the output file cannot be written
            RenderFailure: If the engine fails to render the document
        """
        context = {"engine": self._selected_engine, "output_path": output_path}
        try:
            if output_path:
                written = self._engine.output_file(Path(output_path))
                logger.info(f"PDF written to {output_path}")
                return written

            pdf_bytes = self._engine.output_bytes()
        except OSError:
            raise
        except Exception as e:
            logger.error(f"Failed to render PDF: {e}", exc_info=True)
            raise RenderFailure(
                f"Failed to render PDF: {e}", context=context, cause=e
            ) from e

        if not pdf_bytes.startswith(PDF_SIGNATURE):
            raise RenderFailure(
                "Engine output does not start with the PDF signature",
                context=context,
            )

        logger.info(f"Successfully rendered PDF ({len(pdf_bytes)} bytes)")
        return pdf_bytes

    def to_result(self, filename: str = "document.pdf") -> PdfResult:
        """Render in memory and wrap the bytes for an HTTP response.

        Raises:
            RenderFailure: If the engine fails to render the document
        """
        return PdfResult(pdf_bytes=self.render(), filename=filename)  # type: ignore[arg-type]

    def stream(self, filename: str = "document.pdf", target: BinaryIO | None = None) -> None:
        """Deliver the document to the client as a download.

        Args:
            filename: Suggested download filename
            target: Binary stream to write to (standard output by default)
        """
        self._engine.stream_to_client(filename, target)
