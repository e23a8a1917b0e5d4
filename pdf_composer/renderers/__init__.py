"""Rendering engines that turn assembled HTML into PDF bytes."""
