"""Utilities for applications embedding pdfcraft.

This package contains:
- logging_utils: Standard logging setup driven by the package config
"""
