"""Application configuration."""
import locale
import logging
import os
from dataclasses import dataclass
from typing import Optional

from kiosk_qr.schema.models import LATEST_RELEASE, ReleaseDescriptor

logger = logging.getLogger(__name__)


def host_locale() -> Optional[str]:
    """Host locale as a BCP-47 tag (e.g. "en-US"), or None."""
    try:
        language = locale.getlocale()[0]
    except ValueError:
        return None

    if not language or language in ("C", "POSIX"):
        return None
    return language.replace("_", "-")


def env_int(name: str, default: int) -> int:
    """Integer environment variable; falls back to default if malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}, expected an integer; using {default}")
        return default


@dataclass
class ReleaseConfig:
    """Release the generated payload points at."""

    code: int = LATEST_RELEASE.code
    tag: str = LATEST_RELEASE.tag
    checksum: str = LATEST_RELEASE.checksum

    @classmethod
    def from_env(cls) -> "ReleaseConfig":
        """Load config from environment variables."""
        return cls(
            code=env_int("KIOSK_QR_RELEASE_CODE", LATEST_RELEASE.code),
            tag=os.getenv("KIOSK_QR_RELEASE_TAG", LATEST_RELEASE.tag),
            checksum=os.getenv("KIOSK_QR_RELEASE_CHECKSUM", LATEST_RELEASE.checksum),
        )

    def to_descriptor(self) -> ReleaseDescriptor:
        return ReleaseDescriptor(code=self.code, tag=self.tag, checksum=self.checksum)


@dataclass
class AppConfig:
    """Application configuration."""

    output_dir: str = "./output"
    default_locale: Optional[str] = None
    default_time_zone: Optional[str] = None
    release: ReleaseConfig = None

    def __post_init__(self):
        """Initialize default values."""
        if self.release is None:
            self.release = ReleaseConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            output_dir=os.getenv("KIOSK_QR_OUTPUT_DIR", "./output"),
            default_locale=os.getenv("KIOSK_QR_LOCALE") or host_locale(),
            default_time_zone=os.getenv("KIOSK_QR_TIMEZONE") or os.getenv("TZ") or None,
            release=ReleaseConfig.from_env(),
        )


# Global instance
app_config = AppConfig.from_env()
