"""Transformer registry."""
from enum import Enum
from typing import Any, Optional, Tuple

from kiosk_qr.release.locations import DownloadLocationMapper
from kiosk_qr.transformer.coercion import coerce_json_extras, coerce_timestamp

INVALID_ADMIN_EXTRAS_WARNING = "Invalid admin extras"

# Every transformer returns (value, warning or None)
Transformed = Tuple[Any, Optional[str]]


class TransformerRegistry:
    """Registry of available transformers."""

    def __init__(self):
        """Initialize registry."""
        self.transformers = {
            "NONE": lambda x, **kw: (x, None),
            "ENUM_VALUE": lambda x, **kw: (x.value if isinstance(x, Enum) else x, None),
            "DOWNLOAD_LOCATION": self._download_location,
            "TIMESTAMP_MS": self._timestamp_ms,
            "JSON_EXTRAS": self._json_extras,
        }

    def get(self, name: str):
        """Get transformer by name."""
        if name not in self.transformers:
            raise KeyError(f"Unknown transformer: {name}")
        return self.transformers[name]

    def register(self, name: str, func) -> None:
        """Register a custom transformer."""
        self.transformers[name] = func

    def transform(self, value: Any, transformer_name: str, **config) -> Transformed:
        """Apply transformation."""
        transformer = self.get(transformer_name)
        return transformer(value, **config)

    @staticmethod
    def _download_location(value, release=None, **config) -> Transformed:
        """Resolve a DownloadSource against the release."""
        return DownloadLocationMapper.resolve(value, release), None

    @staticmethod
    def _timestamp_ms(value: str, time_zone: Optional[str] = None, **config) -> Transformed:
        """ISO-8601 text to epoch milliseconds. Errors propagate."""
        return coerce_timestamp(value, default_tz=time_zone), None

    @staticmethod
    def _json_extras(value: str, **config) -> Transformed:
        """JSON text to object, sentinel plus warning when malformed."""
        parsed, ok = coerce_json_extras(value)
        return parsed, None if ok else INVALID_ADMIN_EXTRAS_WARNING
