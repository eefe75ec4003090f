"""Interactive CLI for the provisioning QR generator."""
from pathlib import Path
from typing import Any, Dict, Optional

import click
from colorama import Fore, Style

from config import AppConfig, app_config
from kiosk_qr.builder.payload_builder import PayloadBuildError, ProvisioningPayloadBuilder
from kiosk_qr.exporter.json_exporter import JsonExporter
from kiosk_qr.exporter.qr_exporter import QrExporter
from kiosk_qr.schema.models import DownloadSource, WifiSecurityType
from kiosk_qr.validator.record_validator import RecordValidationError, RecordValidator

# Advanced section prompts: (form key, label)
ADVANCED_TEXT_PROMPTS = (
    ("wifiSSID", "Wi-Fi SSID"),
    ("wifiPassword", "Wi-Fi Password"),
    ("proxyHost", "Proxy Host"),
    ("proxyPort", "Proxy Port"),
    ("proxyBypass", "Proxy Bypass"),
    ("pacUrl", "PAC URL"),
    ("localTime", "Local Time (ISO, e.g. 2026-02-18T09:00:00Z)"),
    ("packageDownloadCookieHeader", "Package Download Cookie Header"),
    ("adminExtras", 'Admin Extras (JSON, e.g. {"key":"value"})'),
)


class InteractiveCLI:
    """Interactive CLI interface."""

    def __init__(self, config: Optional[AppConfig] = None):
        """Initialize CLI."""
        self.config = config or app_config
        self.release = self.config.release.to_descriptor()
        self.builder = ProvisioningPayloadBuilder(self.release)
        self.validator = RecordValidator()
        self.json_exporter = JsonExporter()
        self.qr_exporter = QrExporter()

    def print_header(self, title: str):
        """Print a section header."""
        click.echo(f"\n{Fore.CYAN}{'━' * 45}")
        click.echo(f"{Fore.CYAN}{title}")
        click.echo(f"{Fore.CYAN}{'━' * 45}{Style.RESET_ALL}\n")

    def run(self) -> Optional[str]:
        """Run the form. Returns the payload JSON, or None on error."""
        self.print_header(f"Generate QR code for {self.release.label}")

        form = self.prompt_form()

        try:
            record = self.validator.parse(form)
        except RecordValidationError as e:
            click.echo(f"{Fore.RED}Invalid configuration:")
            for error in e.errors:
                click.echo(f"{Fore.RED}   • {error}")
            return None

        try:
            result = self.builder.build(record)
        except PayloadBuildError as e:
            click.echo(f"{Fore.RED}Failed to build payload: {e}")
            return None

        for warning in result.warnings:
            click.echo(f"{Fore.YELLOW}⚠ {warning}")

        text = self.json_exporter.render(result.payload)

        self.print_header("Provisioning QR Code")
        self.qr_exporter.print_terminal(text)
        click.echo("Scan during device setup")

        if click.confirm("Show JSON?", default=False):
            click.echo(text)

        self._offer_exports(result.payload, text)
        return text

    def prompt_form(self) -> Dict[str, Any]:
        """Prompt for every form value."""
        form: Dict[str, Any] = {
            "downloadSource": click.prompt(
                "Download Method",
                type=click.Choice([s.value for s in DownloadSource]),
                default=DownloadSource.GITHUB.value,
            ),
            "enterpriseName": click.prompt("Enterprise Name", default="Webview Kiosk"),
        }

        if not click.confirm("Configure advanced options?", default=False):
            form["locale"] = self.config.default_locale
            form["timeZone"] = self.config.default_time_zone
            return form

        self.print_header("Advanced Options")
        form["leaveAllSystemAppsEnabled"] = click.confirm(
            "Leave all system apps enabled?", default=False
        )
        form["skipEncryption"] = click.confirm("Skip encryption?", default=False)
        form["wifiHidden"] = click.confirm("Wi-Fi hidden?", default=False)
        form["locale"] = click.prompt(
            "Locale (e.g. en-US)", default=self.config.default_locale or "", show_default=True
        )
        form["timeZone"] = click.prompt(
            "Time Zone (e.g. America/New_York)",
            default=self.config.default_time_zone or "",
            show_default=True,
        )
        form["wifiSecurityType"] = click.prompt(
            "Wi-Fi Security Type",
            type=click.Choice([t.value for t in WifiSecurityType]),
            default=WifiSecurityType.WPA.value,
        )

        for key, label in ADVANCED_TEXT_PROMPTS:
            form[key] = click.prompt(label, default="", show_default=False)

        return form

    def _offer_exports(self, payload: Dict[str, Any], text: str):
        """Offer to save the JSON and a PNG image."""
        output_dir = Path(self.config.output_dir)

        if click.confirm("Save JSON?", default=False):
            path = self.json_exporter.export(output_dir / "provisioning.json", payload)
            click.echo(f"{Fore.GREEN}✅ Saved {path}")

        if click.confirm("Save QR code image?", default=False):
            path = self.qr_exporter.save_png(text, output_dir / "provisioning.png")
            click.echo(f"{Fore.GREEN}✅ Saved {path}")
