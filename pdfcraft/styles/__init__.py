"""CSS handling for HTML payloads.

This package contains:
- stylesheet: Parses raw CSS with tinycss2 and merges it into HTML
- tag_styles: Lifts style blocks out of HTML and maps them onto fpdf2 tag styles
"""

from pdfcraft.styles.stylesheet import merge_css, parse_stylesheet, render_stylesheet
from pdfcraft.styles.tag_styles import build_tag_styles, split_styles

__all__ = [
    "build_tag_styles",
    "merge_css",
    "parse_stylesheet",
    "render_stylesheet",
    "split_styles",
]
