#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and defaults for PDF Composer.

Package-relative paths (templates) are resolved from this file's location.
Working-directory paths (logs) are resolved once at import time; the output
directory is kept relative so it is resolved when a batch starts.

The package structure:
    pdf_composer/
    ├── core/          # Exceptions, logging, paths
    ├── models/        # Enumerations and configuration
    ├── builders/      # HTML assembly, PDF batch builder, metadata writer
    ├── renderers/     # Rendering engines
    ├── pipeline/      # Programmatic API and CLI
    └── templates/     # Jinja2 document templates
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


# ----- Package directory -----
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
DOCUMENT_TEMPLATE = "document.html.jinja2"

# ----- Identity -----
PACKAGE_NAME = "PDF Composer"
"""Value written to the Producer entry of every generated PDF."""

# ----- Defaults -----
DEFAULT_OUTPUT_DIRECTORY = Path("pdf_composer_pdfs")
DEFAULT_MARGIN_MM = 10.0
MM_PER_INCH = 25.4

# ---- Logs ----
LOG_DIR = Path.cwd() / "logs"
