"""Paper configuration model.

This module defines the PaperConfig Pydantic model describing the page a
document is laid out on: a named format or a custom size, and an
orientation. Custom sizes are given in millimetres.

Example:
    ```python
    from pdfcraft.models.paper_config import PaperConfig

    paper = PaperConfig(format="CUSTOM", orientation="landscape", custom_size=(100, 150))
    paper.page_size  # (425.19..., 283.46...) in points
    ```
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator
from reportlab.lib.pagesizes import A3, A4, landscape, legal, letter, portrait
from reportlab.lib.units import mm

SUPPORTED_FORMATS = ("A4", "A3", "LETTER", "LEGAL", "CUSTOM")
SUPPORTED_ORIENTATIONS = ("portrait", "landscape")

# Named page sizes in points (1/72 inch), portrait
PAGE_SIZES: dict[str, tuple[float, float]] = {
    "A4": A4,
    "A3": A3,
    "LETTER": letter,
    "LEGAL": legal,
}


class PaperConfig(BaseModel):
    """Page format and orientation for a document.

    Attributes:
        format: Named format, or "CUSTOM" (options: A4, A3, LETTER, LEGAL, CUSTOM)
        orientation: Page orientation (options: "portrait", "landscape")
        custom_size: (width, height) in millimetres, used only with CUSTOM
    """

    model_config = {"extra": "forbid", "frozen": True}

    format: str = Field(
        default="A4",
        description="Paper format name",
    )

    orientation: str = Field(
        default="portrait",
        description="Page orientation",
    )

    custom_size: tuple[float, float] | None = Field(
        default=None,
        description="Custom (width, height) in millimetres",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        """Validate the paper format name.

        Raises:
            ValueError: If the format is not supported
        """
        if value not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Format must be one of: {', '.join(SUPPORTED_FORMATS)}"
            )
        return value

    @field_validator("orientation")
    @classmethod
    def validate_orientation(cls, value: str) -> str:
        """Validate the orientation name.

        Raises:
            ValueError: If the orientation is not supported
        """
        if value not in SUPPORTED_ORIENTATIONS:
            raise ValueError(
                f"Orientation must be one of: {', '.join(SUPPORTED_ORIENTATIONS)}"
            )
        return value

    @field_validator("custom_size", mode="before")
    @classmethod
    def validate_custom_size(cls, value: Any) -> Any:
        """Accept any two-element sequence of positive numbers.

        Raises:
            ValueError: If the pair is malformed or not positive
        """
        if value is None:
            return None
        if isinstance(value, (str, bytes)) or len(value) != 2:
            raise ValueError("Custom size must be a (width, height) pair")
        for dimension in value:
            if isinstance(dimension, bool) or not isinstance(dimension, (int, float)):
                raise ValueError(
                    f"Custom size dimensions must be numbers, got {type(dimension).__name__}"
                )
            if dimension <= 0:
                raise ValueError(
                    f"Custom size dimensions must be positive, got {dimension}"
                )
        return tuple(float(dimension) for dimension in value)

    @model_validator(mode="after")
    def check_custom_size(self) -> "PaperConfig":
        """Require a custom size when the format is CUSTOM."""
        if self.format == "CUSTOM" and self.custom_size is None:
            raise ValueError("Custom size required when using CUSTOM format")
        return self

    @property
    def is_custom(self) -> bool:
        return self.format == "CUSTOM"

    @property
    def page_size(self) -> tuple[float, float]:
        """Page (width, height) in points with orientation applied."""
        if self.is_custom:
            width, height = self.custom_size  # type: ignore[misc]
            size = (width * mm, height * mm)
        else:
            size = PAGE_SIZES[self.format]

        if self.orientation == "landscape":
            return landscape(size)
        return portrait(size)
