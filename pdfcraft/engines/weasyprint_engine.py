"""WeasyPrint engine adapter.

WeasyPrint lays out a whole HTML document at once, so this adapter
buffers HTML fragments and page settings and builds one document when
output is requested. Each set_paper call opens a new section laid out on
its own named CSS page.
"""

import logging
from pathlib import Path

from weasyprint import HTML

from pdfcraft.engines.base_engine import RenderingEngine
from pdfcraft.models.engine_options import WeasyPrintOptions
from pdfcraft.models.paper_config import PaperConfig

logger = logging.getLogger(__name__)


def _css_page_size(paper: PaperConfig) -> str:
    width, height = paper.page_size
    return f"{width:.2f}pt {height:.2f}pt"


class _Section:
    """HTML fragments laid out on one paper setting."""

    def __init__(self, paper: PaperConfig | None = None) -> None:
        self.paper = paper
        self.fragments: list[str] = []


class WeasyPrintEngine(RenderingEngine):
    """Rendering engine adapter for WeasyPrint.

    Supports:
    - Named and custom page sizes through CSS paged media
    - Image resolution capping via ``write_pdf(dpi=...)``
    - A default body font and base URL from the engine options

    Attributes:
        options: Engine construction options
        image_dpi: Maximum image resolution, or None for WeasyPrint's default
    """

    options_model = WeasyPrintOptions

    def __init__(self, options: WeasyPrintOptions | None = None) -> None:
        self.options = options or WeasyPrintOptions()
        self.image_dpi: int | None = None
        self._sections: list[_Section] = [_Section()]

    @property
    def name(self) -> str:
        return "weasyprint"

    def init_page(self, paper: PaperConfig) -> None:
        self._sections.append(_Section(paper))

    def write_html(self, html: str) -> None:
        self._sections[-1].fragments.append(html)

    def set_resolution(self, dpi: int) -> None:
        self.image_dpi = dpi

    def build_document(self) -> str:
        """Assemble buffered sections into a single HTML document."""
        default_paper = PaperConfig(format=self.options.format)
        font = self.options.default_font.replace('"', "")
        rules = [
            f"@page {{ size: {_css_page_size(default_paper)}; }}",
            f'body {{ font-family: "{font}"; }}',
        ]

        body: list[str] = []
        for index, section in enumerate(self._sections):
            content = "\n".join(section.fragments)
            if section.paper is None:
                body.append(content)
                continue

            page_name = f"section-{index}"
            rules.append(f"@page {page_name} {{ size: {_css_page_size(section.paper)}; }}")
            style = f"page: {page_name}"
            if any(body):
                style += "; break-before: page"
            body.append(f'<div style="{style}">{content}</div>')

        return (
            "<!DOCTYPE html><html><head>"
            f'<meta charset="{self.options.mode}">'
            f"<style>{' '.join(rules)}</style>"
            f"</head><body>{''.join(body)}</body></html>"
        )

    def _document(self) -> HTML:
        return HTML(
            string=self.build_document(),
            base_url=self.options.base_url,
            encoding=self.options.mode,
        )

    def _write_options(self) -> dict:
        if self.image_dpi is None:
            return {}
        return {"dpi": self.image_dpi}

    def output_bytes(self) -> bytes:
        pdf_bytes = self._document().write_pdf(**self._write_options())
        logger.debug(f"WeasyPrint rendered {len(pdf_bytes)} bytes")
        return pdf_bytes

    def output_file(self, path: Path) -> bool:
        self._document().write_pdf(target=str(path), **self._write_options())
        logger.debug(f"WeasyPrint wrote {path}")
        return True
