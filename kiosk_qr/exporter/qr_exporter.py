"""QR code exporter."""
import logging
from pathlib import Path
from typing import Optional, TextIO

import qrcode
from qrcode.constants import ERROR_CORRECT_M

logger = logging.getLogger(__name__)


class QrExporter:
    """Encode payload text as a QR code image."""

    def __init__(self, box_size: int = 10, border: int = 4):
        """Initialize exporter."""
        self.box_size = box_size
        self.border = border

    def make(self, text: str) -> qrcode.QRCode:
        """Build a QR code sized to fit the text."""
        qr = qrcode.QRCode(
            version=None,
            error_correction=ERROR_CORRECT_M,
            box_size=self.box_size,
            border=self.border,
        )
        qr.add_data(text)
        qr.make(fit=True)
        logger.debug(f"QR code version {qr.version} for {len(text)} characters")
        return qr

    def save_png(self, text: str, output_file: Path) -> Path:
        """Write the QR code as a PNG image."""
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        img = self.make(text).make_image(fill_color="black", back_color="white")
        img.save(str(output_file))

        return output_file

    def print_terminal(self, text: str, out: Optional[TextIO] = None) -> None:
        """Draw the QR code with block characters."""
        self.make(text).print_ascii(out=out, invert=True)
