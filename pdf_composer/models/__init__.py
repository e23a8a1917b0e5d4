"""Render configuration, enumerations and per-document data."""
