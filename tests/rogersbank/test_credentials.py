"""
Tests for Credentials, device ids and the delegate helpers.
"""

import re

import pytest

from rogersbank.auth.constants import (
    DEFAULT_DEVICE_INFO,
    JSON_HEADERS,
    authentication_headers,
)
from rogersbank.auth.credentials import (
    DEVICE_ID_SEPARATOR,
    Credentials,
    generate_device_id,
)
from rogersbank.auth.delegate import AuthenticatorDelegate, resolve

from conftest import AsyncStubDelegate, StubDelegate

DEVICE_ID_PATTERN = re.compile(r"[0-9a-f]{32}%7C[0-9a-f]{32}")


class TestDeviceId:
    def test_format(self):
        """Test two lowercase hex segments joined by %7C."""
        device_id = generate_device_id()

        assert DEVICE_ID_PATTERN.fullmatch(device_id)
        assert device_id.count(DEVICE_ID_SEPARATOR) == 1

    def test_unique(self):
        """Test consecutive ids differ."""
        assert len({generate_device_id() for _ in range(20)}) == 20


class TestCredentials:
    """Tests for Credentials and its payload builders."""

    def test_create_keeps_given_device_id(self):
        credentials = Credentials.create("alice", "pw", "my-device")

        assert credentials.device_id == "my-device"

    @pytest.mark.parametrize("device_id", [None, ""])
    def test_create_generates_device_id(self, device_id):
        credentials = Credentials.create("alice", "pw", device_id)

        assert DEVICE_ID_PATTERN.fullmatch(credentials.device_id)

    def test_immutable(self):
        credentials = Credentials.create("alice", "pw", "d")

        with pytest.raises(AttributeError):
            credentials.password = "other"  # type: ignore

    def test_repr_hides_password(self):
        credentials = Credentials.create("alice", "hunter2-secret", "d")

        assert "hunter2-secret" not in repr(credentials)
        assert "alice" in repr(credentials)

    def test_authentication_payload(self):
        credentials = Credentials.create("alice", "pw", "d")

        assert credentials.authentication_payload("info") == {
            "username": "alice",
            "password": "pw",
            "deviceId": "d",
            "deviceInfo": "info",
        }

    def test_only_authentication_payload_has_password(self):
        """Test the later steps never receive the password."""
        credentials = Credentials.create("alice", "pw", "d")

        payloads = [
            credentials.preferences_payload(),
            credentials.code_generation_payload("info", "sms"),
            credentials.validation_payload("info", "123456"),
        ]

        for payload in payloads:
            assert "password" not in payload
            assert "pw" not in payload.values()

    def test_code_generation_payload(self):
        credentials = Credentials.create("alice", "pw", "d")

        assert credentials.code_generation_payload("info", "sms") == {
            "username": "alice",
            "deviceId": "d",
            "deviceInfo": "info",
            "preferenceType": "sms",
        }

    def test_validation_payload_without_code(self):
        credentials = Credentials.create("alice", "pw", "d")

        payload = credentials.validation_payload("info", None)

        assert "oneTimePassCode" not in payload
        assert payload["deviceId"] == "d"

    def test_validation_payload_empty_code_is_sent(self):
        """Test an empty string is still a supplied code."""
        credentials = Credentials.create("alice", "pw", "d")

        assert credentials.validation_payload("info", "")["oneTimePassCode"] == ""


class TestHeaders:
    def test_authentication_headers(self):
        headers = authentication_headers("FIDOBRAND")

        assert headers["Brand_id"] == "FIDOBRAND"
        assert headers["Sourcetype"] == "web"
        assert headers["Content-Type"] == "application/json"

    def test_json_headers_not_mutated(self):
        authentication_headers()

        assert "Brand_id" not in JSON_HEADERS

    def test_default_device_info_is_a_string(self):
        assert isinstance(DEFAULT_DEVICE_INFO, str)
        assert DEFAULT_DEVICE_INFO.startswith("[")


class TestDelegate:
    def test_stub_delegates_match_protocol(self):
        assert isinstance(StubDelegate(), AuthenticatorDelegate)
        assert isinstance(AsyncStubDelegate(), AuthenticatorDelegate)

    def test_incomplete_delegate_does_not_match(self):
        class OnlyCode:
            def get_two_factor_code(self):
                return "1"

        assert not isinstance(OnlyCode(), AuthenticatorDelegate)

    @pytest.mark.asyncio
    async def test_resolve_plain_value(self):
        assert await resolve("123456") == "123456"
        assert await resolve(None) is None

    @pytest.mark.asyncio
    async def test_resolve_coroutine(self):
        async def code():
            return "654321"

        assert await resolve(code()) == "654321"
