"""
Unit tests for the Response wrapper.
"""

import json

import requests

from telesign_client import Response


def make_raw(status_code, body, content_type='application/json'):
    raw = requests.Response()
    raw.status_code = status_code
    raw._content = body
    raw.headers['Content-Type'] = content_type
    raw.encoding = 'utf-8'
    return raw


class TestResponse:
    """Test response normalization."""

    def test_json_body(self):
        payload = {"reference_id": "ABC123", "status": {"code": 290}}
        response = Response(make_raw(200, json.dumps(payload).encode()))

        assert response.status_code == 200
        assert response.ok is True
        assert response.json == payload
        assert response.body == json.dumps(payload)

    def test_non_json_body(self):
        response = Response(make_raw(502, b"<html>Bad Gateway</html>", 'text/html'))

        assert response.ok is False
        assert response.json is None
        assert response.body == "<html>Bad Gateway</html>"

    def test_headers_case_insensitive(self):
        response = Response(make_raw(200, b"{}"))

        assert response.headers['content-type'] == 'application/json'

    def test_raw_and_repr(self):
        raw = make_raw(404, b"{}")
        response = Response(raw)

        assert response.raw is raw
        assert repr(response) == "<Response [404]>"

    def test_round_trip_fields(self):
        """Test JSON encoding then decoding reproduces simple string fields."""
        fields = {"phone_number": "15555550100", "message": "héllo & bye", "empty": ""}
        response = Response(make_raw(200, json.dumps(fields, separators=(',', ':')).encode()))

        assert response.json == fields
