"""
test_html_builder.py
--------------------
Unit tests for the HTML document assembler.
"""
import pytest

from pdf_composer.builders.html_builder import DocumentAssembler
from pdf_composer.models.config import ConfigBuilder, RenderConfig
from pdf_composer.utils.md import markdown_to_html


@pytest.fixture
def assembler():
    return DocumentAssembler()


class TestAssemble:

    def test_title_escaped(self, assembler):
        rendered = assembler.assemble("<p>x</p>", "<Draft> & Notes", RenderConfig())
        assert "<title>&lt;Draft&gt; &amp; Notes</title>" in rendered.markup
        assert rendered.title == "<Draft> & Notes"

    def test_body_inserted_as_html(self, assembler):
        rendered = assembler.assemble("<h1>Heading</h1>\n", "t", RenderConfig())
        assert "<h1>Heading</h1>" in rendered.markup

    def test_a4_portrait_page_size(self, assembler):
        rendered = assembler.assemble("", "t", RenderConfig())
        assert "size: 210.82mm 297.18mm;" in rendered.markup
        assert rendered.geometry.width == "210.82mm"
        assert rendered.geometry.height == "297.18mm"

    def test_landscape_swaps_dimensions(self, assembler):
        config = ConfigBuilder().set_paper_size("Letter").set_orientation("landscape").build()
        rendered = assembler.assemble("", "t", config)
        assert "size: 279.4mm 215.9mm;" in rendered.markup

    def test_margins(self, assembler):
        config = ConfigBuilder().set_margins("5 20 30").build()
        rendered = assembler.assemble("", "t", config)
        assert "margin: 5mm 20mm 30mm 20mm;" in rendered.markup

    def test_font_face(self, assembler):
        config = ConfigBuilder().set_font("times-bold-italic").build()
        markup = assembler.assemble("", "t", config).markup
        assert "font-family: 'Times New Roman', Times, serif;" in markup
        assert "font-weight: bold;" in markup
        assert "font-style: italic;" in markup

    def test_self_contained(self, assembler):
        markup = assembler.assemble("<p>text</p>", "t", RenderConfig()).markup
        assert "http" not in markup
        assert "<link" not in markup
        assert "src=" not in markup

    def test_utf8_declared(self, assembler):
        markup = assembler.assemble("", "t", RenderConfig()).markup
        assert markup.startswith("<!DOCTYPE html>")
        assert '<meta charset="utf-8">' in markup


class TestTemplateSources:

    def test_dict_templates(self):
        assembler = DocumentAssembler(
            templates={"document.html.jinja2": "{{ title }}|{{ page_width }}"}
        )
        rendered = assembler.assemble("", "Notes", RenderConfig())
        assert rendered.markup == "Notes|210.82mm"

    def test_templates_dir(self, tmp_path):
        (tmp_path / "plain.html").write_text("<title>{{ title }}</title>")
        assembler = DocumentAssembler(templates_dir=tmp_path, template_name="plain.html")
        assert assembler.assemble("", "A", RenderConfig()).markup == "<title>A</title>"

    def test_both_sources_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="not both"):
            DocumentAssembler(templates_dir=tmp_path, templates={"a": "b"})


class TestRawHtmlInBody:

    def test_no_external_markup_from_raw_html(self, assembler):
        body = markdown_to_html(
            '<script src="https://cdn.example.com/x.js"></script>\n\n'
            '<img src="http://example.com/a.png">\n'
        )
        markup = assembler.assemble(body, "t", RenderConfig()).markup
        assert "<script" not in markup
        assert "<img" not in markup
        assert 'src="http' not in markup
