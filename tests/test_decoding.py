"""Tests for bnetwow/decoding.py — JSON decoding."""

import pytest

from bnetwow.decoding import decode_json
from bnetwow.errors import DecodeError


class TestDecodeJson:

    def test_object(self):
        assert decode_json(b'{"id": 19019, "name": "Thunderfury"}') == {"id": 19019, "name": "Thunderfury"}

    def test_collection_key(self):
        body = b'{"realms": [{"name": "Khaz Modan"}, {"name": "Medivh"}]}'
        assert decode_json(body, "realms") == [{"name": "Khaz Modan"}, {"name": "Medivh"}]

    def test_invalid_json(self):
        with pytest.raises(DecodeError, match="not valid JSON"):
            decode_json(b"<html>503</html>")

    def test_invalid_utf8(self):
        with pytest.raises(DecodeError):
            decode_json(b"\xff\xfe\x00")

    def test_missing_collection_key(self):
        with pytest.raises(DecodeError, match="realms"):
            decode_json(b'{"status": "nok"}', "realms")

    def test_collection_not_a_list(self):
        with pytest.raises(DecodeError):
            decode_json(b'{"realms": {}}', "realms")

    def test_collection_on_non_object(self):
        with pytest.raises(DecodeError):
            decode_json(b"[1, 2]", "realms")
