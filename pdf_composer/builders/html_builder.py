#!/usr/bin/env python3
"""
html_builder.py
-----------
Assembles the self-contained HTML document handed to the rendering engine.

The document embeds the page size (orientation applied), margins and body
font as CSS, and the title in the head. It references no external
resources, so rendering never touches the network.

Usage:
    from pdf_composer.builders.html_builder import DocumentAssembler

    assembler = DocumentAssembler()
    rendered = assembler.assemble(body_html, "Notes", config)

    # Testing: supply templates as dict
    assembler = DocumentAssembler(templates={"document.html.jinja2": "{{ title }}"})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, Optional

# --- Third-party imports ---
from jinja2 import BaseLoader, DictLoader, Environment, FileSystemLoader

# --- Local imports ---
from pdf_composer.core.paths import DOCUMENT_TEMPLATE, TEMPLATES_DIR
from pdf_composer.models.config import RenderConfig
from pdf_composer.models.document import RenderedDocument
from pdf_composer.renderers.base import PageGeometry


class DocumentAssembler:
    """
    Jinja2-based HTML document assembler.

    Attributes:
        env: Configured Jinja2 Environment instance (autoescaping on)
        template_name: Template used for every document
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        templates: Optional[Dict[str, str]] = None,
        template_name: str = DOCUMENT_TEMPLATE,
    ) -> None:
        """
        Initialize the assembler.

        Args:
            templates_dir: Directory of templates (FileSystemLoader)
            templates: Dict of template_name → template_string (DictLoader)
            template_name: Template to render

        Raises:
            ValueError: If both templates_dir and templates are provided
        """
        if templates_dir and templates:
            raise ValueError("Provide either templates_dir or templates, not both")

        loader: BaseLoader
        if templates is not None:
            loader = DictLoader(templates)
        else:
            loader = FileSystemLoader(str(templates_dir or TEMPLATES_DIR))

        self.env = Environment(
            loader=loader,
            autoescape=True,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template_name = template_name

    def assemble(
        self, body_html: str, title: str, config: RenderConfig
    ) -> RenderedDocument:
        """
        Build the HTML document for one source.

        Args:
            body_html: Body already converted from Markdown
            title: Resolved document title (escaped in the output)
            config: Batch render configuration

        Returns:
            RenderedDocument with markup, geometry and title
        """
        geometry = PageGeometry.from_config(config)
        template = self.env.get_template(self.template_name)
        markup = template.render(
            title=title,
            body=body_html,
            page_width=geometry.width,
            page_height=geometry.height,
            margins=config.margins.css(),
            font=config.font.face,
        )
        return RenderedDocument(markup=markup, geometry=geometry, title=title)
