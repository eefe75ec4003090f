"""
Payload Builder - Orchestrates provisioning payload generation

Integrates:
- FieldBuilder: key/value construction with the inclusion rule
- TransformerRegistry: timestamp and admin extras coercion
- DownloadLocationMapper: APK URL for the chosen download source
- JSON rendering for the QR code
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from kiosk_qr.builder import keys
from kiosk_qr.builder.field_builder import FieldBuilder, FieldMapping
from kiosk_qr.schema.models import LATEST_RELEASE, ConfigurationRecord, ReleaseDescriptor
from kiosk_qr.transformer.coercion import TimestampCoercionError
from kiosk_qr.transformer.registry import TransformerRegistry

logger = logging.getLogger(__name__)

JSON_INDENT = 2

# Output order of the payload follows this table
PROVISIONING_MAPPINGS: Tuple[FieldMapping, ...] = (
    FieldMapping("component_name", keys.DEVICE_ADMIN_COMPONENT_NAME, "release"),
    FieldMapping(
        "download_source",
        keys.DEVICE_ADMIN_PACKAGE_DOWNLOAD_LOCATION,
        "required",
        transformer="DOWNLOAD_LOCATION",
    ),
    FieldMapping("checksum", keys.DEVICE_ADMIN_PACKAGE_CHECKSUM, "release"),
    FieldMapping("leave_all_system_apps_enabled", keys.LEAVE_ALL_SYSTEM_APPS_ENABLED, "required"),
    FieldMapping("skip_encryption", keys.SKIP_ENCRYPTION, "required"),
    FieldMapping("wifi_hidden", keys.WIFI_HIDDEN, "required"),
    FieldMapping("locale", keys.LOCALE),
    FieldMapping("time_zone", keys.TIMEZONE),
    FieldMapping("wifi_ssid", keys.WIFI_SSID),
    FieldMapping("wifi_password", keys.WIFI_PASSWORD),
    FieldMapping("wifi_security_type", keys.WIFI_SECURITY_TYPE, "required", transformer="ENUM_VALUE"),
    FieldMapping("proxy_host", keys.WIFI_PROXY_HOST),
    FieldMapping("proxy_port", keys.WIFI_PROXY_PORT),
    FieldMapping("proxy_bypass", keys.WIFI_PROXY_BYPASS),
    FieldMapping("pac_url", keys.WIFI_PAC_URL),
    FieldMapping("local_time", keys.LOCAL_TIME, transformer="TIMESTAMP_MS"),
    FieldMapping("package_download_cookie_header", keys.DEVICE_ADMIN_PACKAGE_DOWNLOAD_COOKIE_HEADER),
    FieldMapping("admin_extras", keys.ADMIN_EXTRAS_BUNDLE, transformer="JSON_EXTRAS"),
)


class PayloadBuildError(ValueError):
    """Raised when a record cannot be turned into a payload"""

    def __init__(self, field_name: str, cause: Exception):
        super().__init__(f"{field_name}: {cause}")
        self.field_name = field_name
        self.cause = cause


@dataclass
class BuildResult:
    """A built payload plus any non-fatal warnings"""
    payload: Dict[str, Any]
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings


class ProvisioningPayloadBuilder:
    """
    Builds Android provisioning extras from a ConfigurationRecord

    Usage:
    ```python
    builder = ProvisioningPayloadBuilder(LATEST_RELEASE)
    result = builder.build(ConfigurationRecord(wifi_ssid="Office"))
    text = builder.to_json(result.payload)
    ```

    The builder keeps no per-build state, so one instance can serve any
    number of records.
    """

    def __init__(
        self,
        release: ReleaseDescriptor,
        transformers: Optional[TransformerRegistry] = None,
        mappings: Tuple[FieldMapping, ...] = PROVISIONING_MAPPINGS,
    ):
        """
        Initialize ProvisioningPayloadBuilder

        Args:
            release: Release whose URL, checksum and component are written
            transformers: Transformer registry (default registry if omitted)
            mappings: Ordered field mappings
        """
        self.release = release
        self.transformers = transformers or TransformerRegistry()
        self.field_builder = FieldBuilder(self.transformers)
        self.mappings = mappings

    def build(self, record: ConfigurationRecord) -> BuildResult:
        """
        Build the provisioning payload

        Args:
            record: Validated configuration

        Returns:
            BuildResult with the ordered payload and warnings

        Raises:
            PayloadBuildError: If local_time is not a valid date-time
        """
        result = BuildResult(payload={})

        for mapping in self.mappings:
            try:
                target, value, warning = self.field_builder.build_field(
                    mapping, record, self.release
                )
            except TimestampCoercionError as e:
                logger.error(f"Cannot build payload, {mapping.source} is invalid: {e}")
                raise PayloadBuildError(mapping.source, e) from e

            if value is not None:
                result.payload[target] = value
            if warning:
                result.warnings.append(warning)

        logger.debug(
            f"Built payload with {len(result.payload)} keys for {self.release.label}"
        )
        return result

    def build_json(self, record: ConfigurationRecord) -> Tuple[str, List[str]]:
        """Build and render in one step. Returns (json_text, warnings)."""
        result = self.build(record)
        return self.to_json(result.payload), result.warnings

    @staticmethod
    def to_json(payload: Dict[str, Any]) -> str:
        """Render a payload as indented JSON, keeping insertion order"""
        return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)


# ============================================================================
# Builder convenience functions
# ============================================================================


def build_provisioning_payload(
    record: ConfigurationRecord,
    release: Optional[ReleaseDescriptor] = None,
) -> BuildResult:
    """Build a payload for the given release (latest release by default)"""
    builder = ProvisioningPayloadBuilder(release or LATEST_RELEASE)
    return builder.build(record)
