"""Tests for the configuration and release models."""
from dataclasses import FrozenInstanceError

import pytest

from kiosk_qr.schema.models import (
    LATEST_RELEASE,
    ConfigurationRecord,
    DownloadSource,
    ReleaseDescriptor,
    WifiSecurityType,
)


class TestConfigurationRecord:
    """Test ConfigurationRecord construction."""

    def test_defaults(self):
        """Test defaults match the form defaults."""
        record = ConfigurationRecord()

        assert record.download_source is DownloadSource.GITHUB
        assert record.enterprise_name == "Webview Kiosk"
        assert record.wifi_security_type is WifiSecurityType.WPA
        assert record.skip_encryption is False
        assert record.admin_extras is None

    def test_enum_strings_are_coerced(self):
        """Test plain strings become enum members."""
        record = ConfigurationRecord(download_source="F-Droid", wifi_security_type="EAP")

        assert record.download_source is DownloadSource.F_DROID
        assert record.wifi_security_type is WifiSecurityType.EAP

    def test_unknown_enum_value_rejected(self):
        """Test closed enums reject unknown values."""
        with pytest.raises(ValueError):
            ConfigurationRecord(download_source="Play Store")

        with pytest.raises(ValueError):
            ConfigurationRecord(wifi_security_type="WPA3")

    def test_empty_text_becomes_none(self):
        """Test empty optional text is stored as absent."""
        record = ConfigurationRecord(locale="", wifi_ssid="", admin_extras="")

        assert record.locale is None
        assert record.wifi_ssid is None
        assert record.admin_extras is None

    def test_empty_enterprise_name_rejected(self):
        with pytest.raises(ValueError, match="enterprise_name"):
            ConfigurationRecord(enterprise_name="")

    def test_non_text_optional_field_rejected(self):
        """Test optional text must be text, so it is never dropped silently."""
        with pytest.raises(TypeError, match="proxy_port"):
            ConfigurationRecord(proxy_port=8080)

    def test_non_bool_flag_rejected(self):
        with pytest.raises(TypeError, match="wifi_hidden"):
            ConfigurationRecord(wifi_hidden="yes")

    def test_is_immutable(self):
        record = ConfigurationRecord()

        with pytest.raises(FrozenInstanceError):
            record.wifi_ssid = "changed"

    def test_equal_records(self):
        """Test value semantics."""
        assert ConfigurationRecord(wifi_ssid="a") == ConfigurationRecord(wifi_ssid="a")
        assert ConfigurationRecord(wifi_ssid="a") != ConfigurationRecord(wifi_ssid="b")

    def test_to_dict(self):
        data = ConfigurationRecord(download_source="IzzyOnDroid").to_dict()

        assert data["download_source"] == "IzzyOnDroid"
        assert data["wifi_security_type"] == "WPA"
        assert data["local_time"] is None


class TestReleaseDescriptor:
    """Test ReleaseDescriptor."""

    def test_component_name(self):
        assert LATEST_RELEASE.component_name == "uk.nktnet.webviewkiosk/.WebviewKioskAdminReceiver"

    def test_label(self):
        assert ReleaseDescriptor(code=7, tag="v1.2.3", checksum="x").label == "v1.2.3 (7)"

    def test_latest_release(self):
        assert LATEST_RELEASE.code == 114
        assert LATEST_RELEASE.tag == "v0.26.0"
        assert LATEST_RELEASE.checksum == "VsRVw7D7af80TooieNhluoDw5NrT0dHkt3euY36s52k="
