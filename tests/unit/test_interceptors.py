"""Unit tests for the outbound and success-path interceptors."""

from __future__ import annotations

import httpx

from portal_client.middleware.auth import attach_credential
from portal_client.middleware.envelope import decode_body, unwrap_envelope
from portal_client.models.requests import RequestDescriptor


class TestAttachCredential:
    def test_sets_bearer_header(self):
        descriptor = RequestDescriptor(method="GET", path="/users/me")

        prepared = attach_credential(descriptor, "abc")

        assert prepared.headers == {"Authorization": "Bearer abc"}
        assert descriptor.headers == {}

    def test_missing_credential_returns_same_descriptor(self):
        descriptor = RequestDescriptor(method="GET", path="/users/me", headers={"X-A": "1"})

        assert attach_credential(descriptor, None) is descriptor
        assert attach_credential(descriptor, "") is descriptor

    def test_replaces_caller_authorization_header(self):
        descriptor = RequestDescriptor(
            method="GET", path="/users/me", headers={"authorization": "Basic old"}
        )

        prepared = attach_credential(descriptor, "abc")

        assert prepared.headers == {"Authorization": "Bearer abc"}

    def test_method_is_upper_cased(self):
        assert RequestDescriptor(method="patch", path="/x").method == "PATCH"


class TestUnwrapEnvelope:
    def test_returns_data_of_envelope(self):
        assert unwrap_envelope({"success": True, "data": {"id": 1}}) == {"id": 1}

    def test_success_key_is_enough(self):
        assert unwrap_envelope({"success": False, "data": "x", "error": "e"}) == "x"

    def test_missing_data_is_none(self):
        assert unwrap_envelope({"success": True}) is None

    def test_passes_through_other_shapes(self):
        assert unwrap_envelope({"data": 1}) == {"data": 1}
        assert unwrap_envelope([{"success": True}]) == [{"success": True}]
        assert unwrap_envelope("ok") == "ok"
        assert unwrap_envelope(None) is None


class TestDecodeBody:
    def test_json_body(self):
        assert decode_body(httpx.Response(200, json={"a": 1})) == {"a": 1}

    def test_empty_body(self):
        assert decode_body(httpx.Response(200)) is None

    def test_text_body(self):
        assert decode_body(httpx.Response(502, text="<html>Bad Gateway</html>")) == "<html>Bad Gateway</html>"
