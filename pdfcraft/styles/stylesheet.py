"""Style merging for HTML payloads.

Raw CSS is parsed with tinycss2, re-serialised rule by rule and embedded
in a ``<style>`` element ahead of the HTML body. Only well-formed CSS is
embedded: any parse error reported by tinycss2 is raised as
StyleSheetError.
"""

import logging

import tinycss2
from tinycss2.ast import ParseError, QualifiedRule

from pdfcraft.exceptions.stylesheet_error import StyleSheetError

logger = logging.getLogger(__name__)

HTML_WRAPPER = "<html><head><style>{css}</style></head><body>{html}</body></html>"


def _raise_parse_error(error: ParseError) -> None:
    raise StyleSheetError(
        f"Invalid CSS at line {error.source_line}, column {error.source_column}: "
        f"{error.message}",
        context={
            "kind": error.kind,
            "line": error.source_line,
            "column": error.source_column,
        },
    )


def parse_stylesheet(css: str) -> list:
    """Parse raw CSS text into a list of tinycss2 rules.

    Declarations inside plain style rules are checked as well, so a
    malformed declaration fails here rather than being silently dropped
    by the rendering engine.

    Args:
        css: Raw CSS text

    Returns:
        List of tinycss2 rule nodes (comments and whitespace removed)

    Raises:
        StyleSheetError: If the CSS contains parse errors
    """
    rules = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)

    for rule in rules:
        if isinstance(rule, ParseError):
            _raise_parse_error(rule)
        if isinstance(rule, QualifiedRule):
            declarations = tinycss2.parse_declaration_list(
                rule.content, skip_comments=True, skip_whitespace=True
            )
            for declaration in declarations:
                if isinstance(declaration, ParseError):
                    _raise_parse_error(declaration)

    return rules


def render_stylesheet(rules: list) -> str:
    """Serialise parsed rules back to CSS text, one rule per line."""
    return "\n".join(rule.serialize() for rule in rules)


def merge_css(html: str, css: str | None) -> str:
    """Embed CSS into an HTML payload.

    Args:
        html: HTML fragment or document
        css: Optional raw CSS text. Empty or None leaves the HTML unchanged.

    Returns:
        The HTML wrapped in a document whose head carries the parsed CSS

    Raises:
        StyleSheetError: If the CSS contains parse errors
    """
    if not css:
        return html

    rules = parse_stylesheet(css)
    logger.debug(f"Merging {len(rules)} CSS rule(s) into HTML payload")
    return HTML_WRAPPER.format(css=render_stylesheet(rules), html=html)
