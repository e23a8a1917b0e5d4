#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for PDF Composer.

Provides the text stages of the pipeline:
- Front-matter extraction and parsing
- {{key}} placeholder substitution from front-matter values
- Markdown to HTML conversion

Placeholders must match ``{{identifier}}`` exactly, where identifier is
letters, digits and underscores. Unknown keys are left untouched and
substituted values are never scanned again.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from pathlib import Path
from typing import List, Tuple, Union

# --- Third party imports ---
import yaml
from markdown_it import MarkdownIt

# --- Local imports ---
from pdf_composer.core.exceptions import FrontMatterError, SourceReadError
from pdf_composer.models.document import FrontMatter, SourceDocument, value_to_text


FENCE = "---"
BOM = "\ufeff"
PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")


class UnclosedFrontMatter(ValueError):
    """Opening front-matter fence without a closing fence."""


# ----- YAML Frontmatter Parsing -----
def split_frontmatter(content: str) -> Tuple[str, List[str]]:
    """
    Split markdown content into YAML frontmatter and body.

    Expected format:
        ---
        yaml: content
        ---

        Body content here...

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (frontmatter_text, body_lines)
        - frontmatter_text: YAML content as string (empty if no frontmatter)
        - body_lines: List of body content lines

    Raises:
        UnclosedFrontMatter: If the opening fence is never closed

    Examples:
        >>> content = "---\\nauthor: Richard\\n---\\n\\nBody text"
        >>> fm, body = split_frontmatter(content)
        >>> fm
        'author: Richard'
        >>> body
        ['Body text']
    """
    lines = content.removeprefix(BOM).splitlines()

    if not lines or lines[0].strip() != FENCE:
        return "", lines

    # Find closing ---
    frontmatter_end = None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == FENCE:
            frontmatter_end = i
            break

    if frontmatter_end is None:
        raise UnclosedFrontMatter("Front matter fence is never closed")

    frontmatter_lines = lines[1:frontmatter_end]
    body_lines = lines[frontmatter_end + 1 :]

    # Remove empty lines at start of body
    while body_lines and body_lines[0].strip() == "":
        body_lines.pop(0)

    return "\n".join(frontmatter_lines), body_lines


def parse_frontmatter(text: str, path: Union[str, Path]) -> FrontMatter:
    """
    Parse front-matter YAML into a mapping with string keys.

    Raises:
        FrontMatterError: On YAML syntax errors or a non-mapping block
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise FrontMatterError(
            f"Invalid YAML front matter in {path}: {e}", path
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter in {path} must be a key/value mapping, "
            f"got {type(data).__name__}",
            path,
        )
    return {str(key): value for key, value in data.items()}


def parse_document(path: Union[str, Path], content: str) -> Tuple[FrontMatter, str]:
    """
    Split a document into its front-matter mapping and Markdown body.

    A document without an opening fence has empty front matter and its
    whole text as body.

    Args:
        path: Source path, used in error messages
        content: Full document text

    Returns:
        Tuple of (front_matter, body)

    Raises:
        FrontMatterError: If the front-matter block is malformed
    """
    frontmatter_text, body = _split_document(path, content)
    return parse_frontmatter(frontmatter_text, path), body


def _split_document(path: Union[str, Path], content: str) -> Tuple[str, str]:
    content = content.removeprefix(BOM)
    if content.split("\n", 1)[0].strip() != FENCE:
        return "", content
    try:
        frontmatter_text, body_lines = split_frontmatter(content)
    except UnclosedFrontMatter as e:
        raise FrontMatterError(f"{e} in {path}", path) from e
    return frontmatter_text, "\n".join(body_lines)


def read_source_document(path: Union[str, Path]) -> SourceDocument:
    """
    Read a source file once and split it into front matter and body.

    The front matter is kept as raw text here; parse_frontmatter() turns it
    into a mapping.

    Raises:
        SourceReadError: If the file cannot be read as UTF-8 text
        FrontMatterError: If the opening fence is never closed
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Cannot read source file {path}: {e}", path) from e

    frontmatter_text, body = _split_document(path, content)
    return SourceDocument(path, frontmatter_text, body)


# ----- Placeholders -----
def substitute_placeholders(body: str, front_matter: FrontMatter) -> str:
    """
    Replace {{key}} tokens with the string form of front-matter values.

    Examples:
        >>> substitute_placeholders("By {{author}}. {{missing}}", {"author": "Richard"})
        'By Richard. {{missing}}'
        >>> substitute_placeholders("{{ author }}", {"author": "Richard"})
        '{{ author }}'
    """

    def replace(match: "re.Match[str]") -> str:
        key = match.group(1)
        if key in front_matter:
            return value_to_text(front_matter[key])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, body)


# ----- Markdown -----
# Raw HTML in the body is escaped, never emitted as markup
_markdown = MarkdownIt("commonmark", {"html": False}).enable("table")


def markdown_to_html(body: str) -> str:
    """Render a Markdown body to HTML (CommonMark plus tables, raw HTML escaped)."""
    return _markdown.render(body)
