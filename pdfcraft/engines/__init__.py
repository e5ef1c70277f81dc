"""Rendering engine adapters.

This package contains one adapter per supported engine family:
- weasyprint: WeasyPrint, CSS paged media layout
- fpdf: fpdf2, page-by-page layout with a built-in HTML writer

Engines are created through create_engine, keyed by engine name.
"""

from typing import Any, get_args

from pdfcraft.config import EngineName
from pdfcraft.engines.base_engine import RenderingEngine
from pdfcraft.engines.fpdf_engine import FpdfEngine
from pdfcraft.engines.weasyprint_engine import WeasyPrintEngine

ENGINES: dict[str, type[RenderingEngine]] = {
    "weasyprint": WeasyPrintEngine,
    "fpdf": FpdfEngine,
}

SUPPORTED_ENGINES: tuple[str, ...] = get_args(EngineName)


def create_engine(name: EngineName, config: dict[str, Any] | None = None) -> RenderingEngine:
    """Create an engine adapter with its defaults merged with ``config``.

    Args:
        name: Engine name, one of SUPPORTED_ENGINES
        config: Optional engine options; caller values override defaults

    Returns:
        A new, exclusively owned engine adapter

    Raises:
        KeyError: If the engine name is unknown
        pydantic.ValidationError: If the options are invalid
    """
    engine_class = ENGINES[name]
    options = engine_class.options_model.from_config(config)
    return engine_class(options)


__all__ = [
    "EngineName",
    "ENGINES",
    "SUPPORTED_ENGINES",
    "RenderingEngine",
    "WeasyPrintEngine",
    "FpdfEngine",
    "create_engine",
]
