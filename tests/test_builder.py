"""Tests for the DocumentBuilder façade.

This module contains unit tests for engine selection, option validation,
chaining and error translation. Engines are replaced with mocks where the
test is about the builder's own behaviour.
"""

import io
import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pdfcraft import DocumentBuilder
from pdfcraft.config import reload_config
from pdfcraft.engines import RenderingEngine
from pdfcraft.exceptions import InvalidConfiguration, RenderFailure, StyleSheetError
from pdfcraft.models import PaperConfig, PdfResult


@pytest.fixture
def engine() -> MagicMock:
    """A mock engine returning fake PDF bytes."""
    mock_engine = MagicMock(spec=RenderingEngine)
    mock_engine.output_bytes.return_value = b"%PDF-1.7\n"
    mock_engine.output_file.return_value = True
    return mock_engine


@pytest.fixture
def builder(engine: MagicMock) -> DocumentBuilder:
    """A builder owning the mock engine."""
    with patch("pdfcraft.builder.create_engine", return_value=engine):
        return DocumentBuilder("weasyprint")


class TestConstruction:
    """Tests for engine selection."""

    def test_get_engine_returns_selected_name(self, engine_name: str) -> None:
        """Test that the chosen engine name is reported back."""
        assert DocumentBuilder(engine_name).get_engine() == engine_name

    def test_owns_engine_of_selected_family(self, engine_name: str) -> None:
        """Test that the owned engine matches the selection."""
        assert DocumentBuilder(engine_name).engine.name == engine_name

    @pytest.mark.parametrize("name", ["invalid_engine", "mpdf", "WEASYPRINT", ""])
    def test_unsupported_engine(self, name: str) -> None:
        """Test that unsupported names are rejected."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            DocumentBuilder(name)
        assert str(exc_info.value) == "Engine must be one of: weasyprint, fpdf"
        assert exc_info.value.context["engine"] == name

    def test_default_engine_from_config(self) -> None:
        """Test that the configured default engine is used."""
        assert DocumentBuilder().get_engine() == "weasyprint"

        with patch.dict(os.environ, {"PDFCRAFT_DEFAULT_ENGINE": "fpdf"}):
            reload_config()
            assert DocumentBuilder().get_engine() == "fpdf"

    def test_config_merged_over_defaults(self) -> None:
        """Test that caller config wins over engine defaults."""
        builder = DocumentBuilder("weasyprint", {"default_font": "Arial"})
        assert builder.engine.options.default_font == "Arial"
        assert builder.engine.options.mode == "utf-8"

    def test_invalid_config(self) -> None:
        """Test that invalid engine options become InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            DocumentBuilder("fpdf", {"unit": "px"})
        assert str(exc_info.value).startswith("unit:")

    def test_unknown_config_key(self) -> None:
        """Test that unknown option keys are rejected."""
        with pytest.raises(InvalidConfiguration, match="Extra inputs are not permitted"):
            DocumentBuilder("weasyprint", {"img_dpi": 300})

    def test_each_builder_owns_its_engine(self) -> None:
        """Test that engines are never shared between builders."""
        assert DocumentBuilder("weasyprint").engine is not DocumentBuilder("weasyprint").engine


class TestSetPaper:
    """Tests for set_paper."""

    def test_returns_same_builder(self, builder: DocumentBuilder) -> None:
        """Test chaining."""
        assert builder.set_paper("A4", "portrait") is builder

    def test_forwards_validated_paper(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that the engine receives display mode and paper."""
        builder.set_paper("LEGAL", "landscape")

        engine.set_display_mode.assert_called_once_with("fullpage")
        engine.init_page.assert_called_once_with(
            PaperConfig(format="LEGAL", orientation="landscape")
        )

    def test_invalid_format(self, builder: DocumentBuilder) -> None:
        """Test that formats outside the enumeration are rejected."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            builder.set_paper("InvalidFormat")
        assert str(exc_info.value) == "Format must be one of: A4, A3, LETTER, LEGAL, CUSTOM"

    def test_custom_without_dimensions(self, builder: DocumentBuilder) -> None:
        """Test that CUSTOM requires a size."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            builder.set_paper("CUSTOM")
        assert str(exc_info.value) == "Custom size required when using CUSTOM format"

    def test_custom_with_dimensions(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that CUSTOM with a size succeeds."""
        assert builder.set_paper("CUSTOM", "portrait", [100, 100]) is builder
        paper = engine.init_page.call_args.args[0]
        assert paper.custom_size == (100.0, 100.0)

    def test_custom_size_ignored_for_named_format(
        self, builder: DocumentBuilder, engine: MagicMock
    ) -> None:
        """Test that a size passed with a named format is dropped."""
        builder.set_paper("A4", "portrait", (100, 100))
        assert engine.init_page.call_args.args[0].custom_size is None

    def test_invalid_orientation(self, builder: DocumentBuilder) -> None:
        """Test that unknown orientations are rejected."""
        with pytest.raises(InvalidConfiguration, match="Orientation must be one of"):
            builder.set_paper("A4", "upside-down")

    def test_repeated_failure_leaves_engine_untouched(
        self, builder: DocumentBuilder, engine: MagicMock
    ) -> None:
        """Test that invalid calls fail the same way and never reach the engine."""
        messages = []
        for _ in range(2):
            with pytest.raises(InvalidConfiguration) as exc_info:
                builder.set_paper("B5")
            messages.append(str(exc_info.value))

        assert messages[0] == messages[1]
        assert engine.mock_calls == []

    def test_repeated_calls_add_pages(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that each call starts another page."""
        builder.set_paper("A4").set_paper("A3", "landscape")
        assert engine.init_page.call_count == 2


class TestSetDpi:
    """Tests for set_dpi."""

    @pytest.mark.parametrize("dpi", [72, 96, 150, 300])
    def test_valid_values(self, builder: DocumentBuilder, engine: MagicMock, dpi: int) -> None:
        """Test that in-range values are forwarded and chain."""
        assert builder.set_dpi(dpi) is builder
        engine.set_resolution.assert_called_once_with(dpi)

    @pytest.mark.parametrize("dpi", [0, 71, 301, 500, -72])
    def test_out_of_range(self, builder: DocumentBuilder, engine: MagicMock, dpi: int) -> None:
        """Test that out-of-range values are rejected before the engine."""
        with pytest.raises(InvalidConfiguration, match="DPI must be between 72 and 300"):
            builder.set_dpi(dpi)
        engine.set_resolution.assert_not_called()

    @pytest.mark.parametrize("dpi", [150.0, "150", True, None])
    def test_non_integer(self, builder: DocumentBuilder, dpi) -> None:
        """Test that non-integers are rejected."""
        with pytest.raises(InvalidConfiguration, match="DPI must be an integer"):
            builder.set_dpi(dpi)


class TestLoadHtml:
    """Tests for load_html."""

    def test_without_css(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that HTML is handed over unchanged."""
        assert builder.load_html("<h1>Test</h1>") is builder
        engine.write_html.assert_called_once_with("<h1>Test</h1>")

    def test_with_css(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that CSS is parsed and merged before hand-off."""
        assert builder.load_html("<h1>Test</h1>", "h1 { color: red; }") is builder
        engine.write_html.assert_called_once_with(
            "<html><head><style>h1 { color: red; }</style></head>"
            "<body><h1>Test</h1></body></html>"
        )

    def test_invalid_css_propagates(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that CSS parse errors reach the caller untranslated."""
        with pytest.raises(StyleSheetError):
            builder.load_html("<h1>Test</h1>", "h1 { color red; }")
        engine.write_html.assert_not_called()

    def test_calls_accumulate(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that every call reaches the engine."""
        builder.load_html("<p>one</p>").load_html("<p>two</p>")
        assert engine.write_html.call_count == 2


class TestRender:
    """Tests for render, to_result and stream."""

    def test_render_returns_bytes(self, builder: DocumentBuilder) -> None:
        """Test in-memory rendering."""
        assert builder.render() == b"%PDF-1.7\n"

    def test_render_to_path(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test file rendering returns the engine's success flag."""
        assert builder.render("out.pdf") is True
        engine.output_file.assert_called_once_with(Path("out.pdf"))
        engine.output_bytes.assert_not_called()

    def test_empty_path_renders_bytes(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that an empty path behaves like no path."""
        assert builder.render("") == b"%PDF-1.7\n"
        engine.output_file.assert_not_called()

    def test_engine_error_wrapped(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that engine exceptions become RenderFailure."""
        original = RuntimeError("fatal layout error")
        engine.output_bytes.side_effect = original

        with pytest.raises(RenderFailure) as exc_info:
            builder.render()

        assert str(exc_info.value) == "Failed to render PDF: fatal layout error"
        assert exc_info.value.cause is original
        assert exc_info.value.__cause__ is original
        assert exc_info.value.context["engine"] == "weasyprint"

    def test_fpdf_layout_error_deferred_to_render(self, mock_fpdf) -> None:
        """Test that fpdf layout errors surface from render, not load_html."""
        from fpdf.errors import FPDFException

        original = FPDFException("Character outside the font range")
        mock_fpdf.write_html.side_effect = original
        builder = DocumentBuilder("fpdf").load_html("<p>10 €</p>")

        with pytest.raises(RenderFailure) as exc_info:
            builder.render()

        assert exc_info.value.cause is original
        assert exc_info.value.context["engine"] == "fpdf"

    def test_write_error_not_wrapped(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that file write failures surface as OSError."""
        engine.output_file.side_effect = PermissionError("read-only")

        with pytest.raises(OSError):
            builder.render("/read-only/out.pdf")

    def test_output_without_signature(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that non-PDF output is reported."""
        engine.output_bytes.return_value = b"<html>"

        with pytest.raises(RenderFailure, match="PDF signature"):
            builder.render()

    def test_to_result(self, builder: DocumentBuilder) -> None:
        """Test wrapping rendered bytes for a response."""
        result = builder.to_result("report.pdf")

        assert isinstance(result, PdfResult)
        assert result.pdf_bytes == b"%PDF-1.7\n"
        assert result.filename == "report.pdf"

    def test_stream_passes_through(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test that stream delegates to the engine's client delivery."""
        target = io.BytesIO()

        assert builder.stream("invoice.pdf", target) is None
        engine.stream_to_client.assert_called_once_with("invoice.pdf", target)

    def test_stream_default_filename(self, builder: DocumentBuilder, engine: MagicMock) -> None:
        """Test the default suggested filename."""
        builder.stream()
        engine.stream_to_client.assert_called_once_with("document.pdf", None)
