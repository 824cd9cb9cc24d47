"""A minimal static site generator for Markdown blogs, with an RSS feed and a development server."""

__version__ = "0.1.0"