"""JSON exporter."""
from pathlib import Path
from typing import Any, Dict

from kiosk_qr.builder.payload_builder import ProvisioningPayloadBuilder


class JsonExporter:
    """Export provisioning payloads to JSON."""

    def render(self, payload: Dict[str, Any]) -> str:
        """Render payload as the QR code text."""
        return ProvisioningPayloadBuilder.to_json(payload)

    def export(self, output_file: Path, payload: Dict[str, Any]) -> Path:
        """Export to JSON file."""
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8") as f:
            f.write(self.render(payload))
            f.write("\n")

        return output_file
