"""Android provisioning QR payloads for Webview Kiosk."""

__version__ = "0.1.0"
