"""Tests for the command line interface."""
import json

import pytest
from click.testing import CliRunner

from kiosk_qr.builder import keys
from main import cli

# Keep host locale/time zone out of the payload
NO_HOST_DEFAULTS = ["--locale", "", "--time-zone", ""]


@pytest.fixture
def runner():
    return CliRunner()


class TestGenerateCommand:
    """Test the generate command."""

    def test_json_only_minimal(self, runner):
        """Test default options produce only the always-present keys."""
        result = runner.invoke(cli, ["generate", "--json-only", *NO_HOST_DEFAULTS])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert list(payload) == list(keys.ALWAYS_PRESENT_KEYS)

    def test_options_map_to_keys(self, runner):
        """Test options reach the payload, including coercions."""
        result = runner.invoke(
            cli,
            [
                "generate",
                "--json-only",
                *NO_HOST_DEFAULTS,
                "--download-source", "F-Droid",
                "--wifi-ssid", "Lobby",
                "--wifi-security-type", "EAP",
                "--skip-encryption",
                "--local-time", "2026-02-18T09:00:00Z",
                "--admin-extras", '{"a": 1}',
            ],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload[keys.DEVICE_ADMIN_PACKAGE_DOWNLOAD_LOCATION].endswith("webviewkiosk_114.apk")
        assert payload[keys.WIFI_SSID] == "Lobby"
        assert payload[keys.WIFI_SECURITY_TYPE] == "EAP"
        assert payload[keys.SKIP_ENCRYPTION] is True
        assert payload[keys.LOCAL_TIME] == 1771405200000
        assert payload[keys.ADMIN_EXTRAS_BUNDLE] == {"a": 1}

    def test_invalid_admin_extras_warns(self, runner):
        """Test bad admin extras still produce a payload."""
        result = runner.invoke(
            cli, ["generate", "--json-only", *NO_HOST_DEFAULTS, "--admin-extras", "oops"]
        )

        assert result.exit_code == 0
        assert "Invalid admin extras" in result.output
        assert '"error": "Invalid JSON"' in result.output

    def test_invalid_local_time_exits(self, runner):
        result = runner.invoke(cli, ["generate", "--local-time", "soon"])

        assert result.exit_code == 1
        assert "localTime: Invalid ISO-8601 date-time" in result.output

    def test_empty_enterprise_name_exits(self, runner):
        result = runner.invoke(cli, ["generate", "--enterprise-name", ""])

        assert result.exit_code == 1
        assert "enterpriseName: Required" in result.output

    def test_unknown_download_source(self, runner):
        result = runner.invoke(cli, ["generate", "--download-source", "Play Store"])

        assert result.exit_code != 0

    def test_writes_files(self, runner, tmp_path):
        """Test JSON and PNG outputs."""
        json_file = tmp_path / "out" / "payload.json"
        png_file = tmp_path / "out" / "payload.png"

        result = runner.invoke(
            cli,
            [
                "generate",
                *NO_HOST_DEFAULTS,
                "--no-show-json",
                "--output", str(json_file),
                "--qr", str(png_file),
            ],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(json_file.read_text(encoding="utf-8"))[keys.WIFI_SECURITY_TYPE] == "WPA"
        assert png_file.read_bytes()[:4] == b"\x89PNG"
        assert "JSON saved to" in result.output

    def test_terminal_qr(self, runner):
        result = runner.invoke(cli, ["generate", *NO_HOST_DEFAULTS, "--terminal-qr"])

        assert result.exit_code == 0, result.output
        assert "Scan during device setup" in result.output


class TestReleaseCommand:
    """Test the release command."""

    def test_shows_release(self, runner):
        result = runner.invoke(cli, ["release"])

        assert result.exit_code == 0
        assert "v0.26.0 (114)" in result.output
        assert "uk.nktnet.webviewkiosk/.WebviewKioskAdminReceiver" in result.output
        assert "https://f-droid.org/repo/uk.nktnet.webviewkiosk_114.apk" in result.output


class TestInteractiveCommand:
    """Test the interactive form."""

    def test_basic_form(self, runner):
        """Test the form without advanced options."""
        # source, name, advanced?, show JSON?, save JSON?, save QR?
        answers = "GitHub\nAcme\nn\ny\nn\nn\n"

        result = runner.invoke(cli, ["interactive"], input=answers)

        assert result.exit_code == 0, result.output
        assert "Configure advanced options?" in result.output
        assert "Scan during device setup" in result.output
        assert keys.DEVICE_ADMIN_COMPONENT_NAME in result.output

    def test_advanced_form_with_bad_extras(self, runner):
        """Test the advanced section and the admin extras warning."""
        answers = "\n".join(
            [
                "IzzyOnDroid",  # download method
                "Acme",  # enterprise name
                "y",  # show advanced
                "n",  # leave system apps
                "y",  # skip encryption
                "n",  # wifi hidden
                "en-US",  # locale
                "UTC",  # time zone
                "WPA",  # security type
                "Office",  # ssid
                "",  # password
                "",  # proxy host
                "",  # proxy port
                "",  # proxy bypass
                "",  # pac url
                "",  # local time
                "",  # cookie header
                "{bad",  # admin extras
                "y",  # show JSON
                "n",  # save JSON
                "n",  # save QR
            ]
        ) + "\n"

        result = runner.invoke(cli, ["interactive"], input=answers)

        assert result.exit_code == 0, result.output
        assert "Invalid admin extras" in result.output
        assert "apt.izzysoft.de" in result.output
        assert '"android.app.extra.PROVISIONING_WIFI_SSID": "Office"' in result.output
        assert keys.WIFI_PASSWORD not in result.output
