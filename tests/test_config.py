"""
Unit tests for credential loading

A bad or missing config never raises; it just leaves the server disabled.
"""
import json

import pytest
from pydantic import ValidationError

from mcp_twilio_sms.config import get_port, load_credentials
from mcp_twilio_sms.core import Credentials


class TestLoadCredentials:
    """Test load_credentials."""

    def test_loads_all_fields(self, tmp_path):
        path = tmp_path / "twilio.json"
        path.write_text(json.dumps({
            "accountSid": "AC123",
            "authToken": "secret",
            "phoneNumber": "+15550001111"
        }))

        credentials = load_credentials(path)

        assert credentials.account_sid == "AC123"
        assert credentials.auth_token == "secret"
        assert credentials.phone_number == "+15550001111"
        assert credentials.can_connect

    def test_reads_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "twilio.json"
        path.write_text(json.dumps({"accountSid": "AC1", "authToken": "t"}))
        monkeypatch.setenv("TWILIO_CONFIG_FILE", str(path))

        credentials = load_credentials()

        assert credentials.account_sid == "AC1"
        assert credentials.phone_number is None

    def test_env_not_set(self, monkeypatch):
        monkeypatch.delenv("TWILIO_CONFIG_FILE", raising=False)
        assert load_credentials() is None

    def test_missing_file(self, tmp_path):
        assert load_credentials(tmp_path / "nope.json") is None

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "twilio.json"
        path.write_text("{not json")
        assert load_credentials(path) is None

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "twilio.json"
        path.write_text("[1, 2, 3]")
        assert load_credentials(path) is None

    def test_missing_token_cannot_connect(self, tmp_path):
        path = tmp_path / "twilio.json"
        path.write_text(json.dumps({"accountSid": "AC123", "phoneNumber": "+1555"}))

        credentials = load_credentials(path)

        assert credentials is not None
        assert not credentials.can_connect

    def test_non_string_field_disables(self, tmp_path):
        path = tmp_path / "twilio.json"
        path.write_text(json.dumps({"accountSid": 123, "authToken": "t"}))

        assert load_credentials(path) is None

    def test_account_sid_must_start_with_ac(self, tmp_path):
        path = tmp_path / "twilio.json"
        path.write_text(json.dumps({"accountSid": "XY123", "authToken": "t"}))

        assert load_credentials(path) is None

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "twilio.json"
        path.write_text(json.dumps({"accountSid": "AC1", "authToken": "t", "region": "us1"}))

        assert load_credentials(path).can_connect


class TestCredentials:
    """Test the Credentials model."""

    def test_json_aliases(self):
        credentials = Credentials.model_validate_json(
            '{"accountSid": "AC1", "authToken": "t", "phoneNumber": "+1555"}'
        )
        assert credentials.account_sid == "AC1"
        assert credentials.phone_number == "+1555"

    def test_rejects_non_ac_sid(self):
        with pytest.raises(ValidationError, match="must start with AC"):
            Credentials(account_sid="SK123", auth_token="t")

    def test_frozen(self):
        credentials = Credentials(account_sid="AC1", auth_token="t")
        with pytest.raises(ValidationError):
            credentials.auth_token = "other"


class TestGetPort:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert get_port() == 5010

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert get_port() == 8080

    def test_invalid(self, monkeypatch):
        monkeypatch.setenv("PORT", "http")
        with pytest.raises(ValueError, match="Invalid PORT value"):
            get_port()
