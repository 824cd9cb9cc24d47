"""Development HTTP server for a generated site."""

from __future__ import annotations

import io
import os
import re
import sys
from dataclasses import dataclass
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer

_NOT_FOUND_PAGE = b"""<!DOCTYPE html>
<html lang="en">
<head><meta charset="UTF-8"><title>404 Not Found</title></head>
<body><h1>404 Not Found</h1></body>
</html>
"""


def _normalize_path(raw: str) -> str:
    path = raw.split("?", 1)[0].split("#", 1)[0]
    path = re.sub(r"/+", "/", path)
    if len(path) > 1:
        path = path.rstrip("/")
    return path or "/"


class _SiteRequestHandler(SimpleHTTPRequestHandler):
    """Serves files with index.html for directories and an HTML 404 page."""

    def send_head(self):
        fs_path = self.translate_path(_normalize_path(self.path))
        if os.path.isdir(fs_path):
            fs_path = os.path.join(fs_path, "index.html")
        try:
            handle = open(fs_path, "rb")
        except OSError:
            return self._send_not_found()
        try:
            stat = os.fstat(handle.fileno())
            self.send_response(HTTPStatus.OK)
            self.send_header("Content-Type", self.guess_type(fs_path))
            self.send_header("Content-Length", str(stat.st_size))
            self.send_header("Last-Modified", self.date_time_string(stat.st_mtime))
            self.end_headers()
        except Exception:
            handle.close()
            raise
        return handle

    def _send_not_found(self):
        self.send_response(HTTPStatus.NOT_FOUND)
        self.send_header("Content-Type", "text/html")
        self.send_header("Content-Length", str(len(_NOT_FOUND_PAGE)))
        self.end_headers()
        return io.BytesIO(_NOT_FOUND_PAGE)


@dataclass
class DevServer:
    """Serves a static directory over HTTP."""

    static_dir: str
    port: int
    host: str

    def make_server(self) -> ThreadingHTTPServer:
        """Create a bound server for the static directory without starting it."""
        handler = partial(_SiteRequestHandler, directory=self.static_dir)
        return ThreadingHTTPServer((self.host, self.port), handler)

    def start(self) -> None:
        """Serve until interrupted; exits with status 1 if the directory is missing."""
        bind_address = f"{self.host}:{self.port}"
        print("🌐 Starting development server...")
        print(f"📁 Serving: {self.static_dir}")
        print(f"🔗 Local: http://{bind_address}")
        print("⏹️  Press Ctrl+C to stop")

        if not os.path.exists(self.static_dir):
            print(f"❌ Static directory '{self.static_dir}' does not exist!", file=sys.stderr)
            print("💡 Run 'dodge build' first to generate the site.", file=sys.stderr)
            raise SystemExit(1)

        with self.make_server() as server:
            try:
                server.serve_forever()
            except KeyboardInterrupt:
                pass