"""
test_config.py
--------------
Unit tests for pdf_composer.models.config.

Covers margin shorthand expansion and its all-or-nothing fallback,
DocInfoEntry name normalization, ConfigBuilder and load_config.
"""
import dataclasses
from pathlib import Path

import pytest

from pdf_composer.core.exceptions import ConfigError, ConfigValidationFallback
from pdf_composer.models.config import (
    ConfigBuilder,
    DocInfoEntry,
    PageMargins,
    RenderConfig,
    load_config,
    parse_margins,
)
from pdf_composer.models.enums import (
    PaperOrientation,
    PaperSize,
    PdfVersion,
    StandardFont,
)

DEFAULT = PageMargins(10, 10, 10, 10)


class TestParseMargins:
    """CSS-shorthand margin parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("15", PageMargins(15, 15, 15, 15)),
            ("5 20", PageMargins(5, 20, 5, 20)),
            ("5 20 30", PageMargins(5, 20, 30, 20)),
            ("1 2 3 4", PageMargins(1, 2, 3, 4)),
            ("0", PageMargins(0, 0, 0, 0)),
            ("2.5 7.5", PageMargins(2.5, 7.5, 2.5, 7.5)),
            ("  12\t8  ", PageMargins(12, 8, 12, 8)),
        ],
    )
    def test_shorthand_expansion(self, text, expected):
        assert parse_margins(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "1 2 3 4 5",
            "10 abc",
            "10mm",
            "-5",
            "10 -1 10",
            "nan",
            "inf 10",
        ],
    )
    def test_invalid_input_resets_all_sides(self, text):
        with pytest.warns(ConfigValidationFallback):
            assert parse_margins(text) == DEFAULT

    def test_fallback_is_all_or_nothing(self):
        # The valid first token must not be applied
        with pytest.warns(ConfigValidationFallback):
            margins = parse_margins("25 x")
        assert margins.top == 10

    def test_fallback_logs_warning(self, mock_logger):
        with pytest.warns(ConfigValidationFallback):
            parse_margins("wide", logger=mock_logger)
        mock_logger.log_warning.assert_called_once()
        assert "wide" in mock_logger.log_warning.call_args[0][0]

    def test_css_output(self):
        assert PageMargins(10, 12.5, 10, 0).css() == "10mm 12.5mm 10mm 0mm"


class TestDocInfoEntry:
    """Reserved-name normalization."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("title", "Title"),
            ("TITLE", "Title"),
            ("author", "Author"),
            ("aUtHoR", "Author"),
            ("Subject", "Subject"),
            ("keywords", "Keywords"),
        ],
    )
    def test_reserved_names_are_capitalized(self, name, expected):
        assert DocInfoEntry(name, "key").doc_info_entry == expected

    @pytest.mark.parametrize("name", ["reviewer", "Reviewer", "x-Custom Field", "titles"])
    def test_other_names_kept_verbatim(self, name):
        assert DocInfoEntry(name, "key").doc_info_entry == name

    def test_front_matter_key_unchanged(self):
        assert DocInfoEntry("Author", "Writer_Name").front_matter_key == "Writer_Name"

    @pytest.mark.parametrize("name, key", [("", "author"), ("Author", "")])
    def test_empty_values_rejected(self, name, key):
        with pytest.raises(ValueError):
            DocInfoEntry(name, key)


class TestRenderConfig:

    def test_defaults(self):
        config = RenderConfig()
        assert config.pdf_version is PdfVersion.V1_7
        assert config.paper_size is PaperSize.A4
        assert config.orientation is PaperOrientation.PORTRAIT
        assert config.margins == DEFAULT
        assert config.font is StandardFont.HELVETICA
        assert config.output_directory == Path("pdf_composer_pdfs")
        assert config.doc_info_entries == ()
        assert config.workers is None
        assert config.render_timeout is None

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RenderConfig().paper_size = PaperSize.A3

    def test_relative_output_resolved_at_call_time(self, tmp_path, monkeypatch):
        config = RenderConfig(output_directory=Path("out"))
        monkeypatch.chdir(tmp_path)
        assert config.resolved_output_directory() == tmp_path / "out"

    def test_absolute_output_kept(self, tmp_path):
        config = RenderConfig(output_directory=tmp_path / "pdfs")
        assert config.resolved_output_directory() == tmp_path / "pdfs"

    def test_landscape_swaps_page_size(self):
        portrait = RenderConfig().page_size_mm()
        landscape = RenderConfig(orientation=PaperOrientation.LANDSCAPE).page_size_mm()
        assert landscape == (portrait[1], portrait[0])


class TestConfigBuilder:

    def test_chained_setters(self, tmp_path):
        config = (
            ConfigBuilder()
            .set_pdf_version(PdfVersion.V2_0)
            .set_paper_size(PaperSize.LETTER)
            .set_orientation(PaperOrientation.LANDSCAPE)
            .set_font(StandardFont.TIMES_ROMAN)
            .set_margins("5 15")
            .set_output_directory(tmp_path)
            .set_doc_info_entry("author", "author")
            .set_workers(2)
            .set_render_timeout(30)
            .build()
        )
        assert config.pdf_version is PdfVersion.V2_0
        assert config.paper_size is PaperSize.LETTER
        assert config.orientation is PaperOrientation.LANDSCAPE
        assert config.font is StandardFont.TIMES_ROMAN
        assert config.margins == PageMargins(5, 15, 5, 15)
        assert config.output_directory == tmp_path
        assert config.doc_info_entries == (DocInfoEntry("Author", "author"),)
        assert config.workers == 2
        assert config.render_timeout == 30.0

    def test_string_spellings(self):
        config = (
            ConfigBuilder()
            .set_pdf_version("2.0")
            .set_paper_size("letter")
            .set_orientation("Landscape")
            .set_font("times-roman")
            .build()
        )
        assert config.pdf_version is PdfVersion.V2_0
        assert config.paper_size is PaperSize.LETTER
        assert config.orientation is PaperOrientation.LANDSCAPE
        assert config.font is StandardFont.TIMES_ROMAN

    def test_unknown_spelling_raises(self):
        with pytest.raises(ValueError, match="PaperSize"):
            ConfigBuilder().set_paper_size("A11")

    def test_invalid_margins_fall_back(self):
        with pytest.warns(ConfigValidationFallback):
            config = ConfigBuilder().set_margins("1 2 3 4 5").build()
        assert config.margins == DEFAULT

    def test_duplicate_entry_last_wins(self):
        config = (
            ConfigBuilder()
            .set_doc_info_entry("Author", "author")
            .set_doc_info_entry("Reviewer", "reviewer")
            .set_doc_info_entry("AUTHOR", "writer")
            .build()
        )
        assert config.doc_info_entries == (
            DocInfoEntry("Reviewer", "reviewer"),
            DocInfoEntry("Author", "writer"),
        )

    def test_build_is_a_snapshot(self):
        builder = ConfigBuilder().set_paper_size(PaperSize.A5)
        first = builder.build()
        builder.set_paper_size(PaperSize.A3)
        assert first.paper_size is PaperSize.A5
        assert builder.build().paper_size is PaperSize.A3

    @pytest.mark.parametrize("workers", [0, -2])
    def test_invalid_workers(self, workers):
        with pytest.raises(ValueError):
            ConfigBuilder().set_workers(workers)

    def test_invalid_timeout(self):
        with pytest.raises(ValueError):
            ConfigBuilder().set_render_timeout(0)

    def test_from_config_round_trip(self):
        original = ConfigBuilder().set_font("courier").set_doc_info_entry("k", "v").build()
        assert ConfigBuilder.from_config(original).build() == original


class TestLoadConfig:

    def test_loads_all_options(self, tmp_path):
        path = tmp_path / "composer.yaml"
        path.write_text(
            "pdf_version: 2.0\n"
            "paper_size: Legal\n"
            "orientation: landscape\n"
            'margins: "10 20"\n'
            "font: courier-bold\n"
            "output_directory: build/pdfs\n"
            "workers: 3\n"
            "render_timeout: 12.5\n"
            "doc_info_entries:\n"
            "  author: author\n"
            "  Reviewer: reviewed_by\n"
        )
        config = load_config(path)
        assert config.pdf_version is PdfVersion.V2_0
        assert config.paper_size is PaperSize.LEGAL
        assert config.orientation is PaperOrientation.LANDSCAPE
        assert config.margins == PageMargins(10, 20, 10, 20)
        assert config.font is StandardFont.COURIER_BOLD
        assert config.output_directory == Path("build/pdfs")
        assert config.workers == 3
        assert config.render_timeout == 12.5
        assert config.doc_info_entries == (
            DocInfoEntry("Author", "author"),
            DocInfoEntry("Reviewer", "reviewed_by"),
        )

    def test_numeric_margin(self, tmp_path):
        path = tmp_path / "composer.yaml"
        path.write_text("margins: 25\n")
        assert load_config(path).margins == PageMargins(25, 25, 25, 25)

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "composer.yaml"
        path.write_text("")
        assert load_config(path) == RenderConfig()

    def test_unknown_keys_warned(self, tmp_path, mock_logger):
        path = tmp_path / "composer.yaml"
        path.write_text("paper_size: A5\ncolour: blue\n")
        config = load_config(path, logger=mock_logger)
        assert config.paper_size is PaperSize.A5
        warned = [c[0][0] for c in mock_logger.log_warning.call_args_list]
        assert any("colour" in message for message in warned)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "composer.yaml"
        path.write_text("paper_size: [A4\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "composer.yaml"
        path.write_text("- A4\n- Letter\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "composer.yaml"
        path.write_text("font: comic-sans\n")
        with pytest.raises(ConfigError, match="comic-sans"):
            load_config(path)

    def test_entries_must_be_mapping(self, tmp_path):
        path = tmp_path / "composer.yaml"
        path.write_text("doc_info_entries:\n  - author\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "absent.yaml")
