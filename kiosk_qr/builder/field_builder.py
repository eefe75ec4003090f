"""
Field Builder - Constructs individual provisioning extras

Supports:
- Release fields (value read from the ReleaseDescriptor)
- Required fields (always written, even when False)
- Optional fields (written only for non-empty text)
- Named transformers from the TransformerRegistry
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
import logging

from kiosk_qr.schema.models import ConfigurationRecord, ReleaseDescriptor
from kiosk_qr.transformer.registry import TransformerRegistry

logger = logging.getLogger(__name__)

FIELD_TYPES = ("release", "required", "optional")


@dataclass(frozen=True)
class FieldMapping:
    """Maps a record (or release) attribute to a provisioning extra key"""

    source: str  # Attribute name on the record or release
    target: str  # Provisioning extra key
    type: str = "optional"  # "release", "required", "optional"
    transformer: str = "NONE"  # Transformer to apply

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "source": self.source,
            "target": self.target,
            "type": self.type,
            "transformer": self.transformer,
        }


class FieldBuilder:
    """Builds individual key/value pairs for the provisioning payload"""

    def __init__(self, transformers: Optional[TransformerRegistry] = None):
        """
        Initialize FieldBuilder

        Args:
            transformers: Registry used to resolve transformer names
        """
        self.transformers = transformers or TransformerRegistry()

    def build_field(
        self,
        mapping: FieldMapping,
        record: ConfigurationRecord,
        release: ReleaseDescriptor,
    ) -> Tuple[str, Any, Optional[str]]:
        """
        Build a single provisioning extra

        Args:
            mapping: Field mapping configuration
            record: Validated configuration
            release: Release the payload points at

        Returns:
            Tuple of (target_key, value, warning). A value of None means
            the key must be left out of the payload.
        """
        if mapping.type not in FIELD_TYPES:
            raise ValueError(f"Unknown field type: {mapping.type}")

        if mapping.type == "release":
            source_value = getattr(release, mapping.source)
        else:
            source_value = getattr(record, mapping.source)

        # Inclusion rule: optional text is written only when non-empty
        if mapping.type == "optional" and not self._is_present(source_value):
            return mapping.target, None, None

        value, warning = self.transformers.transform(
            source_value,
            mapping.transformer,
            release=release,
            time_zone=record.time_zone,
        )

        if warning:
            logger.warning(f"{warning} ({mapping.source} → {mapping.target})")

        return mapping.target, value, warning

    @staticmethod
    def _is_present(value: Any) -> bool:
        """Non-empty text counts as present"""
        return isinstance(value, str) and value != ""
