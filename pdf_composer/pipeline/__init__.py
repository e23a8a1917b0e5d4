"""Programmatic API and command-line interface."""
