"""Exceptions, logging and path constants for PDF Composer."""
