#!/usr/bin/env python3
"""Webview Kiosk provisioning QR generator - Entry point."""
import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import click
from colorama import Fore, Style, init

from config import app_config
from kiosk_qr import __version__
from kiosk_qr.builder.payload_builder import PayloadBuildError, ProvisioningPayloadBuilder
from kiosk_qr.cli.interactive import InteractiveCLI
from kiosk_qr.exporter.json_exporter import JsonExporter
from kiosk_qr.exporter.qr_exporter import QrExporter
from kiosk_qr.release.locations import DownloadLocationMapper
from kiosk_qr.schema.models import DownloadSource, WifiSecurityType
from kiosk_qr.validator.record_validator import RecordValidationError, RecordValidator

# Initialize colorama
init(autoreset=True)


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * 44}")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}Webview Kiosk Provisioning QR{Fore.CYAN}        ║")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}Android Device Owner Setup{Fore.CYAN}           ║")
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    click.echo()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Generate Android provisioning QR codes for Webview Kiosk."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@cli.command()
@click.option(
    "--download-source",
    type=click.Choice([s.value for s in DownloadSource]),
    default=DownloadSource.GITHUB.value,
    show_default=True,
    help="Where the device downloads the APK from",
)
@click.option("--enterprise-name", default="Webview Kiosk", show_default=True)
@click.option("--locale", default=lambda: app_config.default_locale, help="e.g. en-US")
@click.option("--time-zone", default=lambda: app_config.default_time_zone, help="e.g. America/New_York")
@click.option("--leave-all-system-apps-enabled", is_flag=True)
@click.option("--skip-encryption", is_flag=True)
@click.option("--wifi-hidden", is_flag=True)
@click.option("--wifi-ssid")
@click.option("--wifi-password")
@click.option(
    "--wifi-security-type",
    type=click.Choice([t.value for t in WifiSecurityType]),
    default=WifiSecurityType.WPA.value,
    show_default=True,
)
@click.option("--proxy-host")
@click.option("--proxy-port")
@click.option("--proxy-bypass")
@click.option("--pac-url")
@click.option("--local-time", help="ISO-8601, e.g. 2026-02-18T09:00:00Z")
@click.option("--package-download-cookie-header")
@click.option("--admin-extras", help='JSON object, e.g. {"key":"value"}')
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write JSON to file")
@click.option("--qr", "qr_file", type=click.Path(dir_okay=False), help="Write QR code PNG to file")
@click.option("--terminal-qr", is_flag=True, help="Draw the QR code in the terminal")
@click.option("--show-json/--no-show-json", default=True, show_default=True)
@click.option("--json-only", is_flag=True, help="Print only the JSON payload")
def generate(**options):
    """Generate a provisioning payload from options."""
    json_only = options["json_only"]
    if not json_only:
        print_banner()

    form = {
        "downloadSource": options["download_source"],
        "enterpriseName": options["enterprise_name"],
        "locale": options["locale"],
        "timeZone": options["time_zone"],
        "leaveAllSystemAppsEnabled": options["leave_all_system_apps_enabled"],
        "skipEncryption": options["skip_encryption"],
        "wifiHidden": options["wifi_hidden"],
        "wifiSSID": options["wifi_ssid"],
        "wifiPassword": options["wifi_password"],
        "wifiSecurityType": options["wifi_security_type"],
        "proxyHost": options["proxy_host"],
        "proxyPort": options["proxy_port"],
        "proxyBypass": options["proxy_bypass"],
        "pacUrl": options["pac_url"],
        "localTime": options["local_time"],
        "packageDownloadCookieHeader": options["package_download_cookie_header"],
        "adminExtras": options["admin_extras"],
    }

    try:
        record = RecordValidator().parse(form)
    except RecordValidationError as e:
        click.echo(f"{Fore.RED}Invalid configuration:", err=True)
        for error in e.errors:
            click.echo(f"{Fore.RED}   • {error}", err=True)
        sys.exit(1)

    builder = ProvisioningPayloadBuilder(app_config.release.to_descriptor())
    try:
        result = builder.build(record)
    except PayloadBuildError as e:
        click.echo(f"{Fore.RED}Failed to build payload: {e}", err=True)
        sys.exit(1)

    for warning in result.warnings:
        click.echo(f"{Fore.YELLOW}⚠ {warning}", err=True)

    exporter = JsonExporter()
    text = exporter.render(result.payload)

    if json_only:
        click.echo(text)
        return

    if options["show_json"]:
        click.echo(text)

    if options["output"]:
        path = exporter.export(options["output"], result.payload)
        click.echo(f"{Fore.GREEN}✅ JSON saved to {path}")

    qr_exporter = QrExporter()
    if options["qr_file"]:
        path = qr_exporter.save_png(text, options["qr_file"])
        click.echo(f"{Fore.GREEN}✅ QR code saved to {path}")

    if options["terminal_qr"]:
        qr_exporter.print_terminal(text)
        click.echo("Scan during device setup")


@cli.command()
def interactive():
    """Fill in the provisioning form interactively."""
    print_banner()

    cli_tool = InteractiveCLI()
    if cli_tool.run() is None:
        sys.exit(1)


@cli.command()
def release():
    """Show the release the payload points at."""
    descriptor = app_config.release.to_descriptor()

    click.echo(f"{Fore.CYAN}Release {descriptor.label}")
    click.echo(f"   Component: {descriptor.component_name}")
    click.echo(f"   Checksum:  {descriptor.checksum}")
    for source, url in DownloadLocationMapper.resolve_all(descriptor).items():
        click.echo(f"   {source.value:12s} {url}")


if __name__ == "__main__":
    cli()
