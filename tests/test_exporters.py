"""Tests for the JSON and QR exporters."""
import io
import json

import pytest

from kiosk_qr.builder.payload_builder import build_provisioning_payload
from kiosk_qr.exporter.json_exporter import JsonExporter
from kiosk_qr.exporter.qr_exporter import QrExporter
from kiosk_qr.schema.models import ConfigurationRecord


@pytest.fixture
def payload():
    record = ConfigurationRecord(wifi_ssid="Lobby", admin_extras='{"mode": "kiosk"}')
    return build_provisioning_payload(record).payload


class TestJsonExporter:
    """Test JSON export."""

    def test_render_matches_builder(self, payload):
        text = JsonExporter().render(payload)

        assert json.loads(text) == payload

    def test_export_creates_parent_dirs(self, payload, tmp_path):
        """Test export writes UTF-8 JSON and creates directories."""
        output_file = tmp_path / "nested" / "dir" / "payload.json"

        path = JsonExporter().export(output_file, payload)

        assert path == output_file
        assert json.loads(output_file.read_text(encoding="utf-8")) == payload


class TestQrExporter:
    """Test QR code export."""

    def test_make_fits_payload(self, payload):
        qr = QrExporter().make(json.dumps(payload, indent=2))

        assert qr.version >= 1

    def test_save_png(self, payload, tmp_path):
        """Test PNG output has a PNG signature."""
        output_file = tmp_path / "qr" / "payload.png"

        path = QrExporter(box_size=4).save_png(json.dumps(payload), output_file)

        assert path == output_file
        assert output_file.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_print_terminal(self):
        out = io.StringIO()

        QrExporter().print_terminal("hello", out=out)

        assert len(out.getvalue().splitlines()) > 10
