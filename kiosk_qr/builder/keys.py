"""Android managed-provisioning extra keys."""

PREFIX = "android.app.extra."

DEVICE_ADMIN_COMPONENT_NAME = PREFIX + "PROVISIONING_DEVICE_ADMIN_COMPONENT_NAME"
DEVICE_ADMIN_PACKAGE_DOWNLOAD_LOCATION = PREFIX + "PROVISIONING_DEVICE_ADMIN_PACKAGE_DOWNLOAD_LOCATION"
DEVICE_ADMIN_PACKAGE_CHECKSUM = PREFIX + "PROVISIONING_DEVICE_ADMIN_PACKAGE_CHECKSUM"
LEAVE_ALL_SYSTEM_APPS_ENABLED = PREFIX + "PROVISIONING_LEAVE_ALL_SYSTEM_APPS_ENABLED"
SKIP_ENCRYPTION = PREFIX + "PROVISIONING_SKIP_ENCRYPTION"
WIFI_HIDDEN = PREFIX + "PROVISIONING_WIFI_HIDDEN"
LOCALE = PREFIX + "PROVISIONING_LOCALE"
TIMEZONE = PREFIX + "PROVISIONING_TIMEZONE"
WIFI_SSID = PREFIX + "PROVISIONING_WIFI_SSID"
WIFI_PASSWORD = PREFIX + "PROVISIONING_WIFI_PASSWORD"
WIFI_SECURITY_TYPE = PREFIX + "PROVISIONING_WIFI_SECURITY_TYPE"
WIFI_PROXY_HOST = PREFIX + "PROVISIONING_WIFI_PROXY_HOST"
WIFI_PROXY_PORT = PREFIX + "PROVISIONING_WIFI_PROXY_PORT"
WIFI_PROXY_BYPASS = PREFIX + "PROVISIONING_WIFI_PROXY_BYPASS"
WIFI_PAC_URL = PREFIX + "PROVISIONING_WIFI_PAC_URL"
LOCAL_TIME = PREFIX + "PROVISIONING_LOCAL_TIME"
DEVICE_ADMIN_PACKAGE_DOWNLOAD_COOKIE_HEADER = PREFIX + "PROVISIONING_DEVICE_ADMIN_PACKAGE_DOWNLOAD_COOKIE_HEADER"
ADMIN_EXTRAS_BUNDLE = PREFIX + "PROVISIONING_ADMIN_EXTRAS_BUNDLE"

# Written for every record
MANDATORY_KEYS = (
    DEVICE_ADMIN_COMPONENT_NAME,
    DEVICE_ADMIN_PACKAGE_DOWNLOAD_LOCATION,
    DEVICE_ADMIN_PACKAGE_CHECKSUM,
    LEAVE_ALL_SYSTEM_APPS_ENABLED,
    SKIP_ENCRYPTION,
    WIFI_HIDDEN,
)

ALWAYS_PRESENT_KEYS = MANDATORY_KEYS + (WIFI_SECURITY_TYPE,)

OPTIONAL_KEYS = (
    LOCALE,
    TIMEZONE,
    WIFI_SSID,
    WIFI_PASSWORD,
    WIFI_PROXY_HOST,
    WIFI_PROXY_PORT,
    WIFI_PROXY_BYPASS,
    WIFI_PAC_URL,
    LOCAL_TIME,
    DEVICE_ADMIN_PACKAGE_DOWNLOAD_COOKIE_HEADER,
    ADMIN_EXTRAS_BUNDLE,
)
