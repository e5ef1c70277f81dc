"""Render a small styled document to output.pdf.

Run from the project root:
    python examples/generate_pdf.py [engine]
"""

import sys

from pdfcraft import DocumentBuilder
from pdfcraft.utils.logging_utils import configure_logging


def main() -> None:
    configure_logging()
    engine = sys.argv[1] if len(sys.argv) > 1 else "weasyprint"

    (
        DocumentBuilder(engine)
        .set_paper("A4")
        .set_dpi(300)
        .load_html("<h1>Hello World</h1>", "h1 { color: blue; }")
        .render("output.pdf")
    )


if __name__ == "__main__":
    main()
