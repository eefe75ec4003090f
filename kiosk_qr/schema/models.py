"""Models for the provisioning configuration and the release it points at."""
from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional


class DownloadSource(str, Enum):
    """Where the device downloads the kiosk APK from."""

    GITHUB = "GitHub"
    F_DROID = "F-Droid"
    IZZY_ON_DROID = "IzzyOnDroid"


class WifiSecurityType(str, Enum):
    """Wi-Fi security types accepted by the provisioning flow."""

    NONE = "NONE"
    WPA = "WPA"
    WEP = "WEP"
    EAP = "EAP"


@dataclass(frozen=True)
class ReleaseDescriptor:
    """Identifies the distributable APK referenced by the payload."""

    code: int  # versionCode, used in F-Droid style repo file names
    tag: str  # git tag, used in GitHub release URLs
    checksum: str  # base64 SHA-256 of the signing certificate
    package_name: str = "uk.nktnet.webviewkiosk"
    admin_receiver: str = ".WebviewKioskAdminReceiver"

    @property
    def component_name(self) -> str:
        """Device admin component, e.g. "pkg/.Receiver"."""
        return f"{self.package_name}/{self.admin_receiver}"

    @property
    def label(self) -> str:
        return f"{self.tag} ({self.code})"


# Attributes that hold optional free text. Empty strings become None.
OPTIONAL_TEXT_FIELDS = (
    "locale",
    "time_zone",
    "wifi_ssid",
    "wifi_password",
    "proxy_host",
    "proxy_port",
    "proxy_bypass",
    "pac_url",
    "local_time",
    "package_download_cookie_header",
    "admin_extras",
)

BOOLEAN_FIELDS = ("leave_all_system_apps_enabled", "skip_encryption", "wifi_hidden")


@dataclass(frozen=True)
class ConfigurationRecord:
    """Validated provisioning options.

    Optional text is stored as ``None`` when absent, never as ``""``, so the
    payload builder only has to check for presence.
    """

    download_source: DownloadSource = DownloadSource.GITHUB
    enterprise_name: str = "Webview Kiosk"
    locale: Optional[str] = None
    time_zone: Optional[str] = None
    leave_all_system_apps_enabled: bool = False
    skip_encryption: bool = False
    wifi_hidden: bool = False
    wifi_ssid: Optional[str] = None
    wifi_password: Optional[str] = None
    wifi_security_type: WifiSecurityType = WifiSecurityType.WPA
    proxy_host: Optional[str] = None
    proxy_port: Optional[str] = None
    proxy_bypass: Optional[str] = None
    pac_url: Optional[str] = None
    local_time: Optional[str] = None
    package_download_cookie_header: Optional[str] = None
    admin_extras: Optional[str] = None

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "download_source", DownloadSource(self.download_source))
        object.__setattr__(self, "wifi_security_type", WifiSecurityType(self.wifi_security_type))

        if not self.enterprise_name:
            raise ValueError("enterprise_name must not be empty")

        for name in BOOLEAN_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be a bool, got {type(getattr(self, name)).__name__}")

        for name in OPTIONAL_TEXT_FIELDS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"{name} must be text or None, got {type(value).__name__}")
            if value == "":
                object.__setattr__(self, name, None)

    def to_dict(self):
        """Convert to dictionary (enum members as their values)."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = value.value if isinstance(value, Enum) else value
        return result


# Latest published release; config.py can override it from the environment
LATEST_RELEASE = ReleaseDescriptor(
    code=114,
    tag="v0.26.0",
    checksum="VsRVw7D7af80TooieNhluoDw5NrT0dHkt3euY36s52k=",
)
