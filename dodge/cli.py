"""Command-line interface."""

from __future__ import annotations

import argparse
import sys

from dodge.config import Config, ConfigError, load_config
from dodge.server import DevServer
from dodge.site import SiteGenerator
from dodge.theme import Theme, parse_theme

VERSION = "0.1.0"


def _port(value: str) -> int:
    port = int(value)
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"{value} is not in 0..=65535")
    return port


def _handle_build(args: argparse.Namespace) -> None:
    try:
        config = load_config()
    except (ConfigError, OSError):
        config = Config()
    try:
        theme = parse_theme(config.theme)
    except ValueError:
        theme = Theme.HACKER
    generator = SiteGenerator(args.input, args.output)
    if args.clean:
        generator.clean()
    generator.build_with_config(config.blog_title, theme)


def _handle_serve(args: argparse.Namespace) -> None:
    if args.build:
        print("🔨 Auto-building site before serving...")
        SiteGenerator(args.input, args.dir).build()
        print()
    DevServer(args.dir, args.port, args.host).start()


def _handle_clean(args: argparse.Namespace) -> None:
    SiteGenerator("", args.output).clean()


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the dodge command."""
    parser = argparse.ArgumentParser(
        prog="dodge", description="A minimal RAM stack static site generator"
    )
    parser.add_argument("--version", "-V", action="version", version=f"dodge {VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    build = commands.add_parser("build", help="Build the static site")
    build.add_argument("-i", "--input", default="content",
                       help="Input directory containing markdown files")
    build.add_argument("-o", "--output", default="public",
                       help="Output directory for generated HTML files")
    build.add_argument("--clean", action="store_true",
                       help="Clean output directory before building")
    build.set_defaults(handler=_handle_build)

    serve = commands.add_parser("serve", help="Serve the static site with a development server")
    serve.add_argument("-d", "--dir", default="public",
                       help="Directory to serve static files from")
    serve.add_argument("-p", "--port", type=_port, default=3000, help="Port to serve on")
    serve.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve.add_argument("--build", action="store_true", help="Auto-build before serving")
    serve.add_argument("--input", default="content", help="Input directory for auto-build")
    serve.set_defaults(handler=_handle_serve)

    clean = commands.add_parser("clean", help="Clean the output directory")
    clean.add_argument("-o", "--output", default="public", help="Output directory to clean")
    clean.set_defaults(handler=_handle_clean)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the dodge command and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())