import json
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from civoapi.core import (
    CivoError,
    HttpTransport,
    MultipleMatchesError,
    SimpleResponse,
    ZeroMatchesError,
    find_match,
    parse_time,
)


@dataclass
class Item:
    id: str
    name: str


ITEMS = [Item("12345", "RSA Key"), Item("233567", "Test")]


class _Handler(BaseHTTPRequestHandler):
    def _handle(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        self.server.seen.append((self.command, self.path, body, dict(self.headers)))
        status, payload = self.server.reply
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = do_POST = do_PUT = do_DELETE = _handle

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    srv = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    srv.seen = []
    srv.reply = (200, b"{}")
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.shutdown()
    srv.server_close()


def _transport(srv):
    host, port = srv.server_address
    return HttpTransport(api_key="token", base_url=f"http://{host}:{port}")


def test_transport_get_decodes_json(server):
    server.reply = (200, b'[{"id": "12345"}]')
    got = _transport(server).request("GET", "/v2/sshkeys")
    assert got == [{"id": "12345"}]
    method, path, _, headers = server.seen[0]
    assert (method, path) == ("GET", "/v2/sshkeys")
    assert headers["Authorization"] == "bearer token"


def test_transport_post_sends_json_body(server):
    server.reply = (200, b'{"result": "success"}')
    body = {"name": "test", "public_key": "ssh-rsa AAAA"}
    got = _transport(server).request("POST", "/v2/sshkeys", body)
    assert got == {"result": "success"}
    assert json.loads(server.seen[0][2]) == body


def test_transport_empty_body_gives_none(server):
    server.reply = (200, b"")
    assert _transport(server).request("DELETE", "/v2/sshkeys/1") is None


def test_transport_http_error_raises(server):
    server.reply = (404, b'{"code": "not_found"}')
    with pytest.raises(CivoError) as info:
        _transport(server).request("GET", "/v2/sshkeys/1")
    assert info.value.status == 404


def test_transport_invalid_json_raises(server):
    server.reply = (200, b"not json")
    with pytest.raises(CivoError):
        _transport(server).request("GET", "/v2/sshkeys")


def test_simple_response_from_dict():
    got = SimpleResponse.from_dict({"result": "success", "id": "abc"})
    assert got == SimpleResponse(id="abc", result="success")


def test_simple_response_rejects_non_object():
    with pytest.raises(CivoError):
        SimpleResponse.from_dict(["success"])


def test_find_match_partial_and_exact():
    assert find_match(ITEMS, "34", ("name", "id")).id == "12345"
    assert find_match(ITEMS, "RSA", ("name", "id")).id == "12345"
    assert find_match(ITEMS, "Test", ("name", "id")).id == "233567"


def test_find_match_exact_beats_partials():
    items = [Item("a1", "web"), Item("a2", "web-2"), Item("a3", "web-3")]
    assert find_match(items, "web", ("name", "id")).id == "a1"


def test_find_match_multiple():
    with pytest.raises(MultipleMatchesError) as info:
        find_match(ITEMS, "23", ("name", "id"))
    assert str(info.value) == (
        "MultipleMatchesError: unable to find 23 because there were multiple matches"
    )


def test_find_match_zero_with_label():
    with pytest.raises(ZeroMatchesError) as info:
        find_match(ITEMS, "missing", ("name", "id"), "team")
    assert str(info.value) == "ZeroMatchesError: unable to find missing team, zero matches"


def test_parse_time_with_offset():
    got = parse_time("2019-09-23T13:04:23.000+01:00")
    assert got == datetime(2019, 9, 23, 13, 4, 23, tzinfo=timezone(timedelta(hours=1)))


def test_parse_time_utc_suffix_round_trip():
    got = parse_time("2019-09-23T12:04:23Z")
    assert got.utcoffset() == timedelta(0)
    assert parse_time(got.isoformat()) == got


def test_parse_time_long_fraction_truncated():
    got = parse_time("2019-09-23T13:04:23.123456789Z")
    assert got.microsecond == 123456


def test_parse_time_empty_and_invalid():
    assert parse_time("") is None
    assert parse_time(None) is None
    with pytest.raises(ValueError):
        parse_time("yesterday")