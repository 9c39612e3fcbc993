"""
Unit tests for responder.py

The responder is a pure function, so these run without a listener.
"""
import json
import re

from http_echo import responder
from http_echo.models.echo import InboundRequest
from http_echo.responder import build_payload, decode_body, handle


def make_request(method="GET", uri="/", headers=None, body=b""):
    return InboundRequest(method=method, uri=uri, headers=headers or [], body=body)


# ── Response shape ──────────────────────────────────────────────────────────

class TestHandle:
    def test_status_and_content_type(self):
        response = handle(make_request())
        assert response.status_code == 200
        assert response.headers == {"content-type": "application/json"}

    def test_get_with_query(self):
        response = handle(make_request(uri="/api/users?id=123", headers=[("Host", "localhost")]))
        data = json.loads(response.body)
        assert data == {
            "method": "GET",
            "uri": "/api/users?id=123",
            "headers": {"host": ["localhost"]},
            "body": "",
        }

    def test_post_with_body(self):
        response = handle(make_request(method="POST", uri="/test", body=b"Hello, Echo Server!"))
        data = json.loads(response.body)
        assert data["method"] == "POST"
        assert data["body"] == "Hello, Echo Server!"

    def test_key_order(self):
        data = json.loads(handle(make_request()).body)
        assert list(data) == ["method", "uri", "headers", "body"]

    def test_any_method_accepted(self):
        data = json.loads(handle(make_request(method="PROPFIND")).body)
        assert data["method"] == "PROPFIND"

    def test_pretty_printed(self):
        text = handle(make_request()).body.decode("utf-8")
        assert text.startswith('{\n    "method": "GET"')

    def test_forward_slashes_not_escaped(self):
        text = handle(make_request(uri="/a/b/c")).body.decode("utf-8")
        assert '"/a/b/c"' in text
        assert "\\/" not in text

    def test_duplicate_headers_preserved(self):
        request = make_request(headers=[("X-Dup", "one"), ("X-Dup", "two")])
        data = json.loads(handle(request).body)
        assert data["headers"]["x-dup"] == ["one", "two"]

    def test_fresh_response_per_call(self):
        request = make_request()
        assert handle(request) is not handle(request)

    def test_non_ascii_escaped(self):
        text = handle(make_request(method="POST", body="é☃".encode("utf-8"))).body
        assert b'"body": "\\u00e9\\u2603"' in text
        assert "é".encode("utf-8") not in text
        assert text.isascii()


# ── Body decoding ───────────────────────────────────────────────────────────

class TestDecodeBody:
    def test_utf8_round_trips(self):
        assert decode_body("naïve ☃".encode("utf-8")) == "naïve ☃"

    def test_invalid_utf8_replaced(self):
        assert decode_body(b"ok\xff\xfe") == "ok\ufffd\ufffd"

    def test_binary_body_still_serializes(self):
        payload = build_payload(make_request(method="PUT", body=bytes(range(256))))
        assert "\ufffd" in payload.body
        json.loads(handle(make_request(body=bytes(range(256)))).body)


# ── Logging ─────────────────────────────────────────────────────────────────

class TestRequestLogging:
    def test_one_line_per_request(self, caplog):
        caplog.set_level("INFO")
        handle(make_request(method="POST", uri="/test?x=1", body=b"12345"))

        events = [r.msg for r in caplog.records if r.name == "http_echo.responder"]
        assert len(events) == 1
        event = events[0]
        assert event["event"] == "POST /test?x=1 - Body: 5 bytes"
        assert event["method"] == "POST"
        assert event["uri"] == "/test?x=1"
        assert event["body_bytes"] == 5
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", event["timestamp"])

    def test_logging_failure_does_not_break_response(self, monkeypatch):
        class BrokenLogger:
            def info(self, *args, **kwargs):
                raise RuntimeError("log sink unavailable")

        monkeypatch.setattr(responder, "logger", BrokenLogger())
        response = handle(make_request(body=b"still here"))

        assert response.status_code == 200
        assert json.loads(response.body)["body"] == "still here"
