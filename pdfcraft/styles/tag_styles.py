"""Stylesheet translation for fpdf2.

fpdf2's HTML writer has no stylesheet support and prints the contents of
``<style>`` elements as page text. Style blocks are lifted out of the
HTML instead, and rules whose selectors are plain tag names are mapped
onto fpdf2 ``tag_styles`` entries. Selectors and declarations fpdf2 has
no equivalent for are dropped.
"""

import logging
import re

import tinycss2
from fpdf.enums import TextEmphasis
from fpdf.fonts import FontFace
from fpdf.html import DEFAULT_TAG_STYLES, color_as_decimal
from tinycss2.ast import Declaration, QualifiedRule

from pdfcraft.styles.stylesheet import parse_stylesheet

logger = logging.getLogger(__name__)

STYLE_BLOCK = re.compile(r"<style\b[^>]*>(.*?)</style\s*>", re.IGNORECASE | re.DOTALL)
HEAD_BLOCK = re.compile(r"<head\b[^>]*>.*?</head\s*>", re.IGNORECASE | re.DOTALL)
DOCUMENT_TAG = re.compile(r"<!DOCTYPE[^>]*>|</?(?:html|body)\b[^>]*>", re.IGNORECASE)
FONT_SIZE = re.compile(r"^(\d+(?:\.\d+)?)(pt|px)?$")

PX_TO_PT = 0.75

BOLD_WEIGHTS = {"bold", "bolder", "600", "700", "800", "900"}
NORMAL_WEIGHTS = {"normal", "lighter", "100", "200", "300", "400", "500"}
ITALIC_STYLES = {"italic", "oblique"}


def split_styles(html: str) -> tuple[str, str]:
    """Separate embedded style blocks from the printable HTML.

    Args:
        html: HTML fragment or document

    Returns:
        (html, css): the HTML without its head, style blocks and document
        wrapper tags, and the concatenated CSS of every style block
    """
    css = "\n".join(STYLE_BLOCK.findall(html))
    body = HEAD_BLOCK.sub("", html)
    body = STYLE_BLOCK.sub("", body)
    body = DOCUMENT_TAG.sub("", body)
    return body, css


def _declarations(rule: QualifiedRule) -> dict[str, str]:
    declared = {}
    for declaration in tinycss2.parse_declaration_list(
        rule.content, skip_comments=True, skip_whitespace=True
    ):
        if isinstance(declaration, Declaration):
            value = tinycss2.serialize(declaration.value).strip().lower()
            declared[declaration.lower_name] = value
    return declared


def _color(value: str | None):
    if not value:
        return None
    try:
        return color_as_decimal(value)
    except ValueError:
        logger.debug(f"Dropping unsupported color value: {value}")
        return None


def _font_size(value: str | None) -> float | None:
    if not value:
        return None
    match = FONT_SIZE.match(value)
    if match is None:
        logger.debug(f"Dropping unsupported font-size value: {value}")
        return None
    size, unit = match.groups()
    return float(size) * PX_TO_PT if unit == "px" else float(size)


def _emphasis(current: TextEmphasis | None, declared: dict[str, str]) -> TextEmphasis | None:
    weight = declared.get("font-weight")
    style = declared.get("font-style")
    if weight not in BOLD_WEIGHTS | NORMAL_WEIGHTS and style not in ITALIC_STYLES | {"normal"}:
        return current

    emphasis = current if current is not None else TextEmphasis(0)
    if weight in BOLD_WEIGHTS:
        emphasis |= TextEmphasis.B
    elif weight in NORMAL_WEIGHTS:
        emphasis &= ~TextEmphasis.B
    if style in ITALIC_STYLES:
        emphasis |= TextEmphasis.I
    elif style == "normal":
        emphasis &= ~TextEmphasis.I
    return emphasis


def _font_face(tag: str, declared: dict[str, str]) -> FontFace | None:
    default = DEFAULT_TAG_STYLES[tag]
    color = _color(declared.get("color"))
    size_pt = _font_size(declared.get("font-size"))
    emphasis = _emphasis(default.emphasis, declared)

    if color is None and size_pt is None and emphasis == default.emphasis:
        return None

    return FontFace(
        family=default.family,
        emphasis=emphasis,
        size_pt=size_pt if size_pt is not None else default.size_pt,
        color=color if color is not None else default.color,
        fill_color=default.fill_color,
    )


def build_tag_styles(css: str) -> dict[str, FontFace]:
    """Map tag-selector CSS rules onto fpdf2 tag styles.

    Supports ``color``, ``font-size`` (pt, px or unitless points),
    ``font-weight`` and ``font-style`` on the tags fpdf2 can style.
    Later rules override earlier ones for the same tag, as in CSS.

    Args:
        css: Raw CSS text

    Returns:
        Mapping of tag name to FontFace, ready for ``FPDF.write_html``

    Raises:
        StyleSheetError: If the CSS contains parse errors
    """
    if not css.strip():
        return {}

    declared_by_tag: dict[str, dict[str, str]] = {}
    for rule in parse_stylesheet(css):
        if not isinstance(rule, QualifiedRule):
            continue
        declarations = _declarations(rule)
        for selector in tinycss2.serialize(rule.prelude).split(","):
            tag = selector.strip().lower()
            if tag in DEFAULT_TAG_STYLES:
                declared_by_tag.setdefault(tag, {}).update(declarations)
            else:
                logger.debug(f"Dropping CSS selector fpdf2 cannot style: {selector.strip()}")

    tag_styles = {}
    for tag, declared in declared_by_tag.items():
        font_face = _font_face(tag, declared)
        if font_face is not None:
            tag_styles[tag] = font_face
    return tag_styles
