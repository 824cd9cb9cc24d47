import xml.etree.ElementTree as ET

import pytest

from dodge.content import to_html
from dodge.rss import (
    FEED_DESCRIPTION,
    FEED_LINK,
    FEED_TITLE,
    RssItem,
    generate_rss_feed,
    render_feed,
)


@pytest.fixture
def site(tmp_path):
    content = tmp_path / "content"
    posts = content / "posts"
    posts.mkdir(parents=True)
    output = tmp_path / "public"
    output.mkdir()
    return content, posts, output


def _parse(output):
    return ET.fromstring((output / "rss.xml").read_bytes())


def test_channel_metadata(site):
    content, _, output = site
    generate_rss_feed(str(content), str(output), [])
    channel = _parse(output).find("channel")
    assert channel.findtext("title") == FEED_TITLE
    assert channel.findtext("link") == FEED_LINK
    assert channel.findtext("description") == FEED_DESCRIPTION
    assert channel.findall("item") == []


def test_items_sorted_newest_first(site):
    content, posts, output = site
    older = posts / "2023-05-01-old-news.md"
    newer = posts / "2024-01-02-fresh.md"
    older.write_text("Old body\n", encoding="utf-8")
    newer.write_text("# Fresh Start\nBody\n", encoding="utf-8")
    generate_rss_feed(str(content), str(output), [str(older), str(newer)])
    items = _parse(output).find("channel").findall("item")
    assert [item.findtext("pubDate") for item in items] == [
        "2024-01-02 00:00:00 +0000",
        "2023-05-01 00:00:00 +0000",
    ]
    assert items[0].findtext("title") == "Fresh Start"
    assert items[1].findtext("title") == "Old News"


def test_link_and_description(site):
    content, posts, output = site
    post = posts / "2024-03-04-hello.md"
    text = "# Hello\n\nSome *text* & more.\n"
    post.write_text(text, encoding="utf-8")
    generate_rss_feed(str(content), str(output), [str(post)])
    item = _parse(output).find("channel").find("item")
    assert item.findtext("link") == "/posts/2024-03-04-hello.html"
    assert item.findtext("description") == to_html(text)


def test_non_posts_are_skipped(site):
    content, posts, output = site
    index = content / "index.md"
    index.write_text("# Home\n", encoding="utf-8")
    post = posts / "2024-01-01-only.md"
    post.write_text("# Only\n", encoding="utf-8")
    generate_rss_feed(str(content), str(output), [str(index), str(post)])
    items = _parse(output).find("channel").findall("item")
    assert [item.findtext("title") for item in items] == ["Only"]


def test_default_date_without_prefix(site):
    content, posts, output = site
    post = posts / "about.md"
    post.write_text("plain\n", encoding="utf-8")
    generate_rss_feed(str(content), str(output), [str(post)])
    item = _parse(output).find("channel").find("item")
    assert item.findtext("pubDate") == "2025-01-01 00:00:00 +0000"
    assert item.findtext("title") == "About"


def test_render_feed_escapes_cdata_terminator():
    item = RssItem(title="a < b", link="/x", description="x]]>y", pub_date="d")
    root = ET.fromstring(render_feed([item]).encode("utf-8"))
    parsed = root.find("channel").find("item")
    assert parsed.findtext("description") == "x]]>y"
    assert parsed.findtext("title") == "a < b"