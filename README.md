# dodge

A minimal static site generator for Markdown blogs. It turns a directory of
Markdown files into themed HTML pages, writes an RSS feed for your posts and
includes a small development server for previewing the result.

## Installation

```
pip install .
```

## Usage

Build the site from `content/` into `public/`:

```
dodge build
```

Options:

- `-i`, `--input DIR`: directory holding Markdown files (default `content`)
- `-o`, `--output DIR`: directory for the generated HTML (default `public`)
- `--clean`: remove the output directory before building

Serve the generated site locally:

```
dodge serve
```

Options:

- `-d`, `--dir DIR`: directory to serve (default `public`)
- `-p`, `--port PORT`: port to listen on (default `3000`)
- `--host HOST`: address to bind to (default `127.0.0.1`)
- `--build`: build the site before serving, using the `vercel` theme and
  the title "My Blog" (the config file is not read here)
- `--input DIR`: input directory used with `--build` (default `content`)

The server answers a directory request with its `index.html`, ignores
repeated and trailing slashes, and returns a small HTML page with status 404
for anything it cannot find. If the directory to serve does not exist, it
exits with status 1 and asks you to run `dodge build` first.

Remove the output directory:

```
dodge clean
```

`dodge --version` prints the version.

## Content layout

Every `*.md` file under the input directory, at any depth, becomes an `.html`
file at the same relative path in the output directory. Markdown is rendered
as CommonMark; raw HTML in it is replaced with `<!-- raw HTML omitted -->`.

A page's title is taken from its first `# ` heading. If it has none, the
title comes from the file name, with any `YYYY-MM-DD-` prefix removed, dashes
turned into spaces and each word capitalised.

Files whose path contains `/posts/` go into `rss.xml` in the output
directory, newest first. Each post's date is read from a `YYYY-MM-DD` prefix
on its file name, and is `2025-01-01` when there is none.

## Configuration

`dodge build` reads `config.toml` from the current directory. If the file
does not exist, it writes one with these defaults:

```toml
blog_title = "Dodge SSG"
theme = "hacker"
```

If the file cannot be read or is invalid, the defaults are used. An unknown
theme name falls back to `hacker`.

Two themes are available. `hacker` shows the blog title as block-letter
ASCII art above the page title. `vercel` shows the blog title in a plain
site header.

## What it does not do

The generated pages link to `/assets/style.css`, but dodge does not write
any stylesheet. Put your own `assets/style.css` in the output directory
(after a `--clean` build, add it again). The `theme-hacker` and
`theme-vercel` classes on the `<html>` element let one stylesheet style both
themes.

## Library use

```python
from dodge.site import SiteGenerator
from dodge.theme import Theme

SiteGenerator("content", "public").build_with_config("My Blog", Theme.HACKER)
```

Other useful pieces: `dodge.content.to_html`, `dodge.content.extract_title`,
`dodge.rss.generate_rss_feed`, `dodge.ascii_art.generate_ascii_art`,
`dodge.config.load_config` and `dodge.server.DevServer`.