"""RSS feed generation for blog posts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from xml.sax.saxutils import escape

from dodge.content import extract_title_from_path, to_html

FEED_TITLE = "My Blog"
FEED_LINK = "http://localhost:3000"
FEED_DESCRIPTION = "A blog powered by Dodge SSG"
FEED_LANGUAGE = "en-us"
DEFAULT_DATE = "2025-01-01"


@dataclass(frozen=True)
class RssItem:
    """A single entry of the feed."""

    title: str
    link: str
    description: str
    pub_date: str


def _cdata(text: str) -> str:
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def _element(name: str, text: str) -> str:
    return f"<{name}>{escape(text)}</{name}>"


def render_feed(items: list[RssItem]) -> str:
    """Render the channel and its items as RSS 2.0 XML."""
    parts = [
        '<?xml version="1.0" encoding="utf-8"?>',
        '<rss version="2.0"><channel>',
        _element("title", FEED_TITLE),
        _element("link", FEED_LINK),
        _element("description", FEED_DESCRIPTION),
        _element("language", FEED_LANGUAGE),
    ]
    for item in items:
        parts.append(
            "<item>"
            + _element("title", item.title)
            + _element("link", item.link)
            + f"<description>{_cdata(item.description)}</description>"
            + _element("pubDate", item.pub_date)
            + "</item>"
        )
    parts.append("</channel></rss>")
    return "".join(parts)


def _strip_header_marks(line: str) -> str:
    while line.startswith("# "):
        line = line[2:]
    return line


def _post_title(content: str, post_path: str) -> str:
    if content.startswith("# "):
        first_line = content.split("\n", 1)[0].removesuffix("\r")
        return _strip_header_marks(first_line)
    return extract_title_from_path(post_path)


def _post_date(post_path: str) -> str:
    name = Path(post_path).name
    stem = Path(name).stem if name and name != ".." else ""
    if len(stem) >= 10 and stem[4] == "-":
        return stem[:10]
    return DEFAULT_DATE


def _post_link(post_path: str, input_dir: str) -> str:
    relative = post_path.replace(input_dir, "").lstrip("/")
    return "/" + relative.replace(".md", ".html")


def _make_item(post_path: str, input_dir: str) -> RssItem:
    content = Path(post_path).read_text(encoding="utf-8")
    return RssItem(
        title=_post_title(content, post_path),
        link=_post_link(post_path, input_dir),
        description=to_html(content),
        pub_date=f"{_post_date(post_path)} 00:00:00 +0000",
    )


def generate_rss_feed(input_dir: str, output_dir: str, posts: list[str]) -> None:
    """Write rss.xml into output_dir for every post under a posts/ directory."""
    items = [_make_item(path, input_dir) for path in posts if "/posts/" in path]
    items.sort(key=lambda item: item.pub_date, reverse=True)
    Path(f"{output_dir}/rss.xml").write_text(render_feed(items), encoding="utf-8")