#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities for PDF Composer commands.

Functions:
    setup_logger: Initialize ComposerLogger for CLI operations

Usage:
    from pdf_composer.core.cli import setup_logger

    logger = setup_logger(log_dir, "build")
    logger.log_info("Starting batch...")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Local imports ---
from pdf_composer.core.logging_manager import ComposerLogger


def setup_logger(log_dir: Path, component_name: str) -> ComposerLogger:
    """
    Setup logging for CLI operations.

    Creates ``<log_dir>/operations`` if needed and returns a logger writing
    into it.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'build')

    Returns:
        Configured ComposerLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return ComposerLogger(operations_log_dir, component_name=component_name)
