import threading
import urllib.error
import urllib.request

import pytest

from dodge.server import DevServer


@pytest.fixture
def served(tmp_path):
    (tmp_path / "index.html").write_text("home page", encoding="utf-8")
    (tmp_path / "posts").mkdir()
    (tmp_path / "posts" / "index.html").write_text("posts index", encoding="utf-8")
    (tmp_path / "posts" / "entry.html").write_text("entry body", encoding="utf-8")
    server = DevServer(str(tmp_path), 0, "127.0.0.1").make_server()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()
    thread.join()


def _get(url):
    with urllib.request.urlopen(url, timeout=5) as response:
        return response.status, response.read().decode("utf-8")


def _fetch(url):
    """Return status, content type and body, including for error responses."""
    try:
        with urllib.request.urlopen(url, timeout=5) as response:
            return (
                response.status,
                response.headers["Content-Type"],
                response.read().decode("utf-8"),
            )
    except urllib.error.HTTPError as error:
        return error.code, error.headers["Content-Type"], error.read().decode("utf-8")


def test_root_serves_index(served):
    assert _get(served + "/") == (200, "home page")


def test_directory_with_trailing_slash_serves_index(served):
    assert _get(served + "/posts/") == (200, "posts index")


def test_directory_without_slash_serves_index(served):
    assert _get(served + "/posts") == (200, "posts index")


def test_repeated_slashes_are_merged(served):
    assert _get(served + "//posts//entry.html") == (200, "entry body")


def test_missing_file_gives_html_404(served):
    status, content_type, body = _fetch(served + "/nope.html")
    assert status == 404
    assert content_type == "text/html"
    assert "404" in body


def test_start_exits_when_directory_missing(tmp_path, capsys):
    server = DevServer(str(tmp_path / "absent"), 0, "127.0.0.1")
    with pytest.raises(SystemExit) as info:
        server.start()
    assert info.value.code == 1
    assert "dodge build" in capsys.readouterr().err