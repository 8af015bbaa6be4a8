"""Tests for bnetwow/security/signer.py — request signing."""

import base64
import hashlib
import hmac
from datetime import datetime, timedelta, timezone

import pytest

from bnetwow.clients.models import ClientConfig
from bnetwow.errors import SigningError
from bnetwow.security.signer import (
    RequestSigner,
    authorization_header,
    canonical_message,
    compute_signature,
    format_timestamp,
)
from tests.conftest import FIXED_TIME


def _expected(secret: str, message: str) -> str:
    digest = hmac.new(secret.encode(), message.encode(), hashlib.sha1).digest()
    return base64.b64encode(digest).decode()


class TestFormatTimestamp:

    def test_http_date(self):
        assert format_timestamp(FIXED_TIME) == "Mon, 19 Oct 2026 12:00:00 GMT"

    def test_naive_treated_as_utc(self):
        naive = FIXED_TIME.replace(tzinfo=None)
        assert format_timestamp(naive) == "Mon, 19 Oct 2026 12:00:00 GMT"

    def test_other_timezone_converted(self):
        cest = timezone(timedelta(hours=2))
        assert format_timestamp(datetime(2026, 10, 19, 14, 0, tzinfo=cest)) == (
            "Mon, 19 Oct 2026 12:00:00 GMT"
        )


class TestCanonicalMessage:

    def test_layout(self):
        msg = canonical_message("GET", "Mon, 19 Oct 2026 12:00:00 GMT", "/wow/item/19019")
        assert msg == "GET\nMon, 19 Oct 2026 12:00:00 GMT\n/wow/item/19019\n"


class TestRequestSigner:

    def test_known_signature(self, auth_config, fixed_signer):
        signed = fixed_signer.sign(auth_config, "GET", "/wow/item/19019")
        message = "GET\nMon, 19 Oct 2026 12:00:00 GMT\n/wow/item/19019\n"
        assert signed.signature == _expected("s3cr3t", message)
        assert signed.timestamp == "Mon, 19 Oct 2026 12:00:00 GMT"
        assert signed.verb == "GET"
        assert signed.path == "/wow/item/19019"

    def test_deterministic(self, auth_config, fixed_signer):
        a = fixed_signer.sign(auth_config, "GET", "/wow/item/19019")
        b = fixed_signer.sign(auth_config, "GET", "/wow/item/19019")
        assert a == b

    def test_each_input_changes_signature(self, auth_config, fixed_signer):
        base = fixed_signer.sign(auth_config, "GET", "/wow/item/19019").signature

        other_verb = fixed_signer.sign(auth_config, "HEAD", "/wow/item/19019").signature
        other_path = fixed_signer.sign(auth_config, "GET", "/wow/item/19020").signature
        other_secret = fixed_signer.sign(
            ClientConfig(host="us.api.battle.net", locale="en_US", secret_key="other", public_key="pub"),
            "GET", "/wow/item/19019",
        ).signature
        later = RequestSigner(clock=lambda: FIXED_TIME + timedelta(seconds=1))
        other_time = later.sign(auth_config, "GET", "/wow/item/19019").signature

        assert len({base, other_verb, other_path, other_secret, other_time}) == 5

    def test_signature_is_base64_sha1(self, auth_config, fixed_signer):
        signed = fixed_signer.sign(auth_config, "GET", "/wow/item/1")
        assert len(base64.b64decode(signed.signature)) == 20

    def test_default_clock_is_used(self, auth_config):
        signed = RequestSigner().sign(auth_config, "GET", "/wow/item/1")
        assert signed.timestamp.endswith(" GMT")

    def test_requires_secret(self, anon_config, fixed_signer):
        with pytest.raises(SigningError):
            fixed_signer.sign(anon_config, "GET", "/wow/item/1")

    def test_hash_failure_raises_signing_error(self):
        # A lone surrogate cannot be UTF-8 encoded
        with pytest.raises(SigningError):
            compute_signature("\ud800", "GET\n")

    def test_unsupported_input_raises_signing_error(self):
        with pytest.raises(SigningError):
            compute_signature(None, "GET\n")


class TestAuthorizationHeader:

    def test_shape(self, auth_config):
        assert authorization_header(auth_config, "abc=") == " BNET pub:abc="
