"""Form input validation."""
from typing import Any, Dict, List, Mapping

from kiosk_qr.schema.models import ConfigurationRecord, DownloadSource, WifiSecurityType
from kiosk_qr.transformer.coercion import TimestampCoercionError, coerce_timestamp

# Form key → ConfigurationRecord attribute
FORM_FIELDS = {
    "downloadSource": "download_source",
    "enterpriseName": "enterprise_name",
    "locale": "locale",
    "timeZone": "time_zone",
    "leaveAllSystemAppsEnabled": "leave_all_system_apps_enabled",
    "skipEncryption": "skip_encryption",
    "wifiHidden": "wifi_hidden",
    "wifiSSID": "wifi_ssid",
    "wifiPassword": "wifi_password",
    "wifiSecurityType": "wifi_security_type",
    "proxyHost": "proxy_host",
    "proxyPort": "proxy_port",
    "proxyBypass": "proxy_bypass",
    "pacUrl": "pac_url",
    "localTime": "local_time",
    "packageDownloadCookieHeader": "package_download_cookie_header",
    "adminExtras": "admin_extras",
}

ENUM_FIELDS = {
    "downloadSource": DownloadSource,
    "wifiSecurityType": WifiSecurityType,
}

BOOLEAN_FIELDS = ("leaveAllSystemAppsEnabled", "skipEncryption", "wifiHidden")


class RecordValidationError(ValueError):
    """Raised when form input cannot become a ConfigurationRecord."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class RecordValidator:
    """Validates raw form input."""

    def validate(self, form: Mapping[str, Any]) -> List[str]:
        """Validate form values. Returns a list of error messages."""
        errors = []

        for key in form:
            if key not in FORM_FIELDS:
                errors.append(f"{key}: Unknown field")

        if not form.get("enterpriseName"):
            errors.append("enterpriseName: Required")

        for key, enum_type in ENUM_FIELDS.items():
            if key not in form:
                continue
            options = [member.value for member in enum_type]
            if form[key] not in options:
                errors.append(f"{key}: Invalid option {form[key]!r}, expected one of {options}")

        for key in BOOLEAN_FIELDS:
            if key in form and not isinstance(form[key], bool):
                errors.append(f"{key}: Expected boolean")

        text_fields = set(FORM_FIELDS) - set(ENUM_FIELDS) - set(BOOLEAN_FIELDS)
        for key in sorted(text_fields):
            value = form.get(key)
            if value is not None and not isinstance(value, str):
                errors.append(f"{key}: Expected string")

        # adminExtras is left to the builder, which recovers from bad JSON
        local_time = form.get("localTime")
        time_zone = form.get("timeZone")
        if not isinstance(time_zone, str):
            time_zone = None
        if isinstance(local_time, str) and local_time:
            try:
                coerce_timestamp(local_time, default_tz=time_zone or None)
            except TimestampCoercionError:
                errors.append("localTime: Invalid ISO-8601 date-time")

        return errors

    def parse(self, form: Mapping[str, Any]) -> ConfigurationRecord:
        """
        Validate form values and build a ConfigurationRecord.

        Missing keys take the record defaults.

        Raises:
            RecordValidationError: If validation fails
        """
        errors = self.validate(form)
        if errors:
            raise RecordValidationError(errors)

        values: Dict[str, Any] = {
            FORM_FIELDS[key]: value for key, value in form.items()
        }
        return ConfigurationRecord(**values)
