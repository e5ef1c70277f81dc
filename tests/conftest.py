"""Pytest configuration and shared fixtures.

This module contains pytest configuration and shared fixtures used
across all test files.
"""

from unittest.mock import MagicMock, patch

import pytest

import pdfcraft.config as config_module

MM_SCALE = 72 / 25.4


@pytest.fixture(autouse=True)
def reset_config():
    """Reset the global configuration before and after each test.

    Each test starts from a freshly loaded configuration and does not
    leave a cached instance behind for other tests.
    """
    config_module._config = None
    yield
    config_module._config = None


@pytest.fixture
def mock_fpdf():
    """Patch the FPDF class used by the fpdf engine.

    Yields the mock document instance the engine will own.
    """
    with patch("pdfcraft.engines.fpdf_engine.FPDF") as fpdf_class:
        document = MagicMock()
        document.k = MM_SCALE
        document.page = 0

        def add_page(*args, **kwargs):
            document.page += 1

        document.add_page.side_effect = add_page
        document.output.return_value = bytearray(b"%PDF-1.3\n%fpdf\n")
        fpdf_class.return_value = document
        yield document


@pytest.fixture
def mock_weasyprint_html():
    """Patch the WeasyPrint HTML class used by the weasyprint engine.

    Yields the mock HTML class; its instances return fake PDF bytes.
    """
    with patch("pdfcraft.engines.weasyprint_engine.HTML") as html_class:
        html_class.return_value.write_pdf.return_value = b"%PDF-1.7\n%weasyprint\n"
        yield html_class


@pytest.fixture(params=["weasyprint", "fpdf"])
def engine_name(request) -> str:
    """Each supported engine name in turn."""
    return request.param
