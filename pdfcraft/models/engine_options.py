"""Engine option models.

This module defines the Pydantic models holding each engine family's
construction options. Defaults are the engine family's own; caller
supplied values are merged over them, so the caller wins on every key.

Example:
    ```python
    from pdfcraft.models.engine_options import FpdfOptions

    options = FpdfOptions.from_config({"creator": "Invoices"})
    options.unit  # "mm"
    ```
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from pdfcraft.config import get_config
from pdfcraft.models.paper_config import PAGE_SIZES


def _validate_named_format(value: str) -> str:
    if value not in PAGE_SIZES:
        raise ValueError(
            f"Default format must be one of: {', '.join(PAGE_SIZES)}"
        )
    return value


class WeasyPrintOptions(BaseModel):
    """Construction options for the WeasyPrint engine.

    Attributes:
        mode: Character encoding handed to the HTML parser (default: "utf-8")
        format: Page format used until set_paper is called (default: "A4")
        default_font: Font family applied to the document body
        base_url: Base URL for resolving relative links and images
    """

    model_config = {"extra": "forbid"}

    mode: str = Field(
        default="utf-8",
        description="Encoding of the HTML input",
        min_length=1,
    )

    format: str = Field(
        default="A4",
        description="Initial page format",
    )

    default_font: str = Field(
        default_factory=lambda: get_config().default_font,
        description="Default body font family",
        min_length=1,
    )

    base_url: str | None = Field(
        default=None,
        description="Base URL for relative resources",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        return _validate_named_format(value)

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None) -> "WeasyPrintOptions":
        """Build options from defaults merged with a caller config mapping."""
        return cls(**(config or {}))


class FpdfOptions(BaseModel):
    """Construction options for the fpdf engine.

    Attributes:
        orientation: Initial orientation code, "P" or "L" (default: "P")
        unit: User unit for coordinates (default: "mm")
        format: Initial page format (default: "A4")
        creator: Creator metadata written into the document
        font: Font family used for HTML text (default: "helvetica")
        font_size: Font size in points (default: 12)
        font_file: Optional TrueType font registered under ``font`` for
            Unicode text
    """

    model_config = {"extra": "forbid"}

    orientation: Literal["P", "L"] = Field(
        default="P",
        description="Initial orientation code",
    )

    unit: Literal["pt", "mm", "cm", "in"] = Field(
        default="mm",
        description="User unit",
    )

    format: str = Field(
        default="A4",
        description="Initial page format",
    )

    creator: str = Field(
        default_factory=lambda: get_config().creator,
        description="Creator metadata",
    )

    font: str = Field(
        default="helvetica",
        description="Font family for HTML text",
        min_length=1,
    )

    font_size: float = Field(
        default=12,
        description="Font size in points",
        gt=0,
        le=144,
    )

    font_file: Path | None = Field(
        default=None,
        description="TrueType font file for Unicode text",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        return _validate_named_format(value)

    @field_validator("font_file", mode="before")
    @classmethod
    def validate_font_file(cls, value: str | Path | None) -> Path | None:
        """Validate and convert the font file path.

        Raises:
            ValueError: If path is provided but file does not exist
        """
        if value is None:
            return None

        path = Path(value) if isinstance(value, str) else value

        if not path.is_file():
            raise ValueError(f"Font file does not exist: {path}")

        return path

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None) -> "FpdfOptions":
        """Build options from defaults merged with a caller config mapping."""
        return cls(**(config or {}))
