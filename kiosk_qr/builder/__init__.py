"""
Payload Builder Module

Builds Android managed-provisioning payloads for Webview Kiosk with:
- Fixed provisioning extra key names
- Required/optional inclusion rules
- Timestamp and admin extras coercion
- Indented JSON rendering for QR codes
"""

from .payload_builder import (
    BuildResult,
    PayloadBuildError,
    ProvisioningPayloadBuilder,
    build_provisioning_payload,
)
from .field_builder import FieldBuilder, FieldMapping

__all__ = [
    "BuildResult",
    "PayloadBuildError",
    "ProvisioningPayloadBuilder",
    "FieldBuilder",
    "FieldMapping",
    "build_provisioning_payload",
]
