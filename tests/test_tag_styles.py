"""Tests for the fpdf2 stylesheet translation.

This module contains unit tests for lifting style blocks out of HTML and
mapping tag-selector rules onto fpdf2 tag styles.
"""

import pytest
from fpdf.enums import TextEmphasis
from fpdf.html import DEFAULT_TAG_STYLES

from pdfcraft.exceptions import StyleSheetError
from pdfcraft.styles import build_tag_styles, merge_css, split_styles


class TestSplitStyles:
    """Tests for split_styles."""

    def test_merged_document_split(self) -> None:
        """Test that a merged payload yields the body and its CSS."""
        html, css = split_styles(merge_css("<h1>Hello World</h1>", "h1 { color: blue; }"))

        assert html == "<h1>Hello World</h1>"
        assert "color: blue" in css

    def test_style_block_in_body_removed(self) -> None:
        """Test that style blocks outside the head are lifted too."""
        html, css = split_styles("<p>a</p><STYLE type='text/css'>p { color: red }</STYLE><p>b</p>")

        assert html == "<p>a</p><p>b</p>"
        assert css.strip() == "p { color: red }"

    def test_head_content_dropped(self) -> None:
        """Test that title text in the head is not kept as page content."""
        html, css = split_styles(
            "<!DOCTYPE html><html><head><title>Invoice</title></head><body><p>x</p></body></html>"
        )

        assert html == "<p>x</p>"
        assert css == ""

    def test_plain_fragment_unchanged(self) -> None:
        """Test that HTML without styles passes through."""
        assert split_styles("<p>plain</p>") == ("<p>plain</p>", "")


class TestBuildTagStyles:
    """Tests for build_tag_styles."""

    def test_color_mapped(self) -> None:
        """Test named and hex colors."""
        styles = build_tag_styles("h1 { color: blue; } p { color: #ff0000 }")

        assert styles["h1"].color.colors == (0, 0, 1)
        assert styles["p"].color.colors == (1, 0, 0)

    def test_font_size_units(self) -> None:
        """Test that px sizes become points and pt sizes are kept."""
        styles = build_tag_styles("h2 { font-size: 20px } p { font-size: 11pt }")

        assert styles["h2"].size_pt == pytest.approx(15)
        assert styles["p"].size_pt == 11

    def test_font_weight_and_style(self) -> None:
        """Test that weight and style toggle fpdf emphasis."""
        styles = build_tag_styles("p { font-weight: bold; font-style: italic } b { font-weight: normal }")

        assert styles["p"].emphasis == TextEmphasis.B | TextEmphasis.I
        assert styles["b"].emphasis == 0

    def test_unset_properties_keep_tag_defaults(self) -> None:
        """Test that a color override keeps the heading's default size."""
        styles = build_tag_styles("h1 { color: blue }")

        assert styles["h1"].size_pt == DEFAULT_TAG_STYLES["h1"].size_pt

    def test_selector_list_and_later_rules(self) -> None:
        """Test selector lists, with later rules overriding earlier ones."""
        styles = build_tag_styles("h1, h2 { color: red } h2 { color: green }")

        assert styles["h1"].color.colors == (1, 0, 0)
        assert styles["h2"].color.colors == pytest.approx((0, 128 / 255, 0))

    def test_unmappable_rules_dropped(self) -> None:
        """Test that classes, unknown tags and unsupported values are ignored."""
        styles = build_tag_styles(
            ".note { color: red } div { color: red } table h1 { color: red } "
            "p { color: rgb(1, 2, 3); margin: 4px; font-size: 2em } @page { size: A4 }"
        )

        assert styles == {}

    def test_empty_css(self) -> None:
        """Test that empty CSS produces no styles."""
        assert build_tag_styles("  ") == {}

    def test_invalid_css_raises(self) -> None:
        """Test that parse errors are reported as StyleSheetError."""
        with pytest.raises(StyleSheetError):
            build_tag_styles("h1 { color blue; }")
