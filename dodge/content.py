"""Markdown rendering and content file handling."""

from __future__ import annotations

import glob
import os
from pathlib import Path

from markdown_it import MarkdownIt

_RAW_HTML_OMITTED = "<!-- raw HTML omitted -->"


def _omit_html_block(self, tokens, idx, options, env):
    return _RAW_HTML_OMITTED + "\n"


def _omit_html_inline(self, tokens, idx, options, env):
    return _RAW_HTML_OMITTED


def _make_renderer() -> MarkdownIt:
    md = MarkdownIt("commonmark")
    md.add_render_rule("html_block", _omit_html_block)
    md.add_render_rule("html_inline", _omit_html_inline)
    return md


_MARKDOWN = _make_renderer()


def to_html(markdown: str) -> str:
    """Render CommonMark to HTML, omitting raw HTML."""
    return _MARKDOWN.render(markdown)


def extract_title(markdown_content: str, fallback_path: str) -> str:
    """Return the text of the first level-one header, or a title from the path."""
    for line in markdown_content.split("\n"):
        stripped = line.strip()
        if stripped.startswith("# "):
            while stripped.startswith("# "):
                stripped = stripped[2:]
            return stripped.strip()
    return extract_title_from_path(fallback_path)


def _strip_date_prefix(stem: str) -> str:
    if len(stem) > 11 and stem[4] == "-" and stem[7] == "-":
        return stem[11:]
    return stem


def extract_title_from_path(path: str) -> str:
    """Turn a file name such as 2024-01-02-my-post.md into a title."""
    name = Path(path).name
    if not name or name == "..":
        stem = "Untitled"
    else:
        stem = _strip_date_prefix(Path(name).stem)
    words = stem.replace("-", " ").split()
    return " ".join(word[0].upper() + word[1:] for word in words)


def collect_posts(input_dir: str) -> list[str]:
    """Return every markdown file under input_dir, sorted by path."""
    pattern = f"{input_dir}/**/*.md"
    return sorted(glob.glob(pattern, recursive=True, include_hidden=True))


def get_output_path(input_path: str, input_dir: str, output_dir: str) -> str:
    """Map a markdown source path to the path of its generated HTML page."""
    return input_path.replace(input_dir, output_dir).replace(".md", ".html")


def ensure_output_dir(output_path: str) -> None:
    """Create the directory that will hold output_path."""
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)