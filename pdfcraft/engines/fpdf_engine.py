"""fpdf2 engine adapter.

fpdf2 lays out content at the moment it is written, so the adapter
records page and HTML operations in order and replays them onto a fresh
FPDF document when output is requested. Engine errors therefore surface
at render time. Orientation is passed as the single-letter codes fpdf2
uses ("P"/"L") and custom sizes are converted from millimetres to the
document's user unit.
"""

import logging
import re
from pathlib import Path

from fpdf import FPDF
from reportlab.lib.units import mm

from pdfcraft.engines.base_engine import RenderingEngine
from pdfcraft.models.engine_options import FpdfOptions
from pdfcraft.models.paper_config import PaperConfig
from pdfcraft.styles.tag_styles import build_tag_styles, split_styles

logger = logging.getLogger(__name__)

ORIENTATION_CODES = {"portrait": "P", "landscape": "L"}

# fpdf2 converts HTML pixel sizes at 72 DPI
BASELINE_DPI = 72

IMG_TAG = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
SIZE_ATTRIBUTE = re.compile(
    r"\b(width|height)\s*=\s*([\"']?)(\d+(?:\.\d+)?)\2", re.IGNORECASE
)


class FpdfEngine(RenderingEngine):
    """Rendering engine adapter for fpdf2.

    Attributes:
        options: Engine construction options
        operations: Recorded ("page", PaperConfig) and ("html", str) steps
        display_mode: Viewer zoom mode applied to the document, if set
        image_scale: Pixel to user-unit ratio for HTML images (dpi / 72)
    """

    options_model = FpdfOptions

    def __init__(self, options: FpdfOptions | None = None) -> None:
        self.options = options or FpdfOptions()
        self.operations: list[tuple[str, PaperConfig | str]] = []
        self.display_mode: str | None = None
        self.image_scale = 1.0

    @property
    def name(self) -> str:
        return "fpdf"

    def set_display_mode(self, mode: str) -> None:
        self.display_mode = mode

    def init_page(self, paper: PaperConfig) -> None:
        self.operations.append(("page", paper))

    def write_html(self, html: str) -> None:
        self.operations.append(("html", html))

    def set_resolution(self, dpi: int) -> None:
        self.image_scale = dpi / BASELINE_DPI

    def scale_images(self, html: str) -> str:
        """Divide explicit ``<img>`` pixel sizes by the image scale."""
        if self.image_scale == 1.0:
            return html

        def scale_attribute(match: re.Match) -> str:
            name, quote, value = match.groups()
            scaled = max(1, round(float(value) / self.image_scale))
            return f"{name}={quote}{scaled}{quote}"

        return IMG_TAG.sub(
            lambda tag: SIZE_ATTRIBUTE.sub(scale_attribute, tag.group(0)),
            html,
        )

    def _add_page(self, pdf: FPDF, paper: PaperConfig) -> None:
        if paper.is_custom:
            width, height = paper.custom_size  # type: ignore[misc]
            page_format: str | tuple[float, float] = (
                width * mm / pdf.k,
                height * mm / pdf.k,
            )
        else:
            page_format = paper.format

        pdf.add_page(
            orientation=ORIENTATION_CODES[paper.orientation],
            format=page_format,
        )

    def _write_html(self, pdf: FPDF, html: str) -> None:
        if pdf.page == 0:
            pdf.add_page()
        body, css = split_styles(self.scale_images(html))
        pdf.write_html(body, tag_styles=build_tag_styles(css))

    def build_document(self) -> FPDF:
        """Create the FPDF document and replay the recorded operations.

        Returns:
            The laid-out document, with at least one page

        Raises:
            fpdf.errors.FPDFException: If fpdf2 cannot lay out the content
            StyleSheetError: If an embedded style block cannot be parsed
        """
        pdf = FPDF(
            orientation=self.options.orientation,
            unit=self.options.unit,
            format=self.options.format,
        )
        pdf.set_creator(self.options.creator)
        if self.options.font_file is not None:
            pdf.add_font(self.options.font, fname=str(self.options.font_file))
        pdf.set_font(self.options.font, size=self.options.font_size)
        if self.display_mode is not None:
            pdf.set_display_mode(zoom=self.display_mode)

        for kind, value in self.operations:
            if kind == "page":
                self._add_page(pdf, value)  # type: ignore[arg-type]
            else:
                self._write_html(pdf, value)  # type: ignore[arg-type]

        if pdf.page == 0:
            pdf.add_page()
        return pdf

    def output_bytes(self) -> bytes:
        pdf_bytes = bytes(self.build_document().output())
        logger.debug(f"fpdf rendered {len(pdf_bytes)} bytes")
        return pdf_bytes

    def output_file(self, path: Path) -> bool:
        self.build_document().output(str(path))
        logger.debug(f"fpdf wrote {path}")
        return True
