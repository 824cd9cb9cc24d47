"""Whole-site generation from a directory of markdown files."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from dodge.ascii_art import generate_ascii_art
from dodge.content import (
    collect_posts,
    ensure_output_dir,
    extract_title,
    get_output_path,
    to_html,
)
from dodge.rss import generate_rss_feed
from dodge.theme import Theme

DEFAULT_BLOG_TITLE = "My Blog"

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en" class="{theme_class}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{page_title}</title>
    <link rel="stylesheet" href="/assets/style.css">
</head>
<body>
    {header}
    <main class="container">
        {content}
    </main>
</body>
</html>"""

_VERCEL_HEADER = """<header class="site-header">
                        <h1 class="site-title">{title}</h1>
                    </header>"""


def _header_html(theme: Theme, blog_title: str, page_title: str) -> str:
    if theme is Theme.HACKER:
        art = generate_ascii_art(blog_title)
        return (
            '<div class="ascii-header-container"><div class="ascii-header">'
            f"{art}<br><br>>>> {page_title} <<<</div></div>"
        )
    return _VERCEL_HEADER.format(title=blog_title)


def wrap_with_template(
    content: str,
    theme: Theme,
    input_path: str,
    markdown_content: str,
    blog_title: str,
) -> str:
    """Wrap rendered page content in the full HTML document for a theme."""
    page_title = extract_title(markdown_content, input_path)
    return _PAGE_TEMPLATE.format(
        theme_class=f"theme-{theme.value}",
        page_title=page_title,
        header=_header_html(theme, blog_title, page_title),
        content=content,
    )


@dataclass
class SiteGenerator:
    """Turns the markdown files of input_dir into HTML pages in output_dir."""

    input_dir: str
    output_dir: str

    def build(self) -> None:
        """Build the site with the default theme."""
        self.build_with_theme(Theme.VERCEL)

    def build_with_config(self, blog_title: str, theme: Theme) -> None:
        """Build the site with a given blog title and theme."""
        self._build(theme, blog_title, announce_title=True)

    def build_with_theme(self, theme: Theme) -> None:
        """Build the site with a given theme and the default blog title."""
        self._build(theme, DEFAULT_BLOG_TITLE, announce_title=False)

    def clean(self) -> None:
        """Remove the output directory if it exists."""
        if os.path.exists(self.output_dir):
            shutil.rmtree(self.output_dir)
            print(f"🧹 Cleaned output directory: {self.output_dir}")

    def _build(self, theme: Theme, blog_title: str, announce_title: bool) -> None:
        print("🚀 Building site...")
        print(f"📁 Input: {self.input_dir}")
        print(f"📁 Output: {self.output_dir}")
        print(f"🎨 Theme: {theme}")
        if announce_title:
            print(f"📝 Blog Title: {blog_title}")

        os.makedirs(self.output_dir, exist_ok=True)

        posts = collect_posts(self.input_dir)
        for post in posts:
            self._generate_page(post, theme, blog_title)

        generate_rss_feed(self.input_dir, self.output_dir, posts)

        print(f"✅ Generated {len(posts)} pages successfully!")
        print("📡 Generated RSS feed: /rss.xml")

    def _generate_page(self, input_path: str, theme: Theme, blog_title: str) -> None:
        markdown = Path(input_path).read_text(encoding="utf-8")
        page = wrap_with_template(
            to_html(markdown), theme, input_path, markdown, blog_title
        )
        output_path = get_output_path(input_path, self.input_dir, self.output_dir)
        ensure_output_dir(output_path)
        Path(output_path).write_text(page, encoding="utf-8")
        print(f"📄 Generated: {input_path} -> {output_path}")