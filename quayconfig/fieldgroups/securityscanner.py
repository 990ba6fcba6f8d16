"""The SecurityScanner field group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quayconfig.shared import FieldTypeError

_WHITELIST_KEY = "SECURITY_SCANNER_V4_NAMESPACE_WHITELIST"


def _take(config: dict[str, Any], key: str, kind: type, type_name: str, current: Any) -> Any:
    if key not in config:
        return current
    value = config[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise FieldTypeError(key, type_name)
    return value


@dataclass
class SecurityScannerFieldGroup:
    """Settings for the image security scanner."""

    feature_security_scanner: bool = field(
        default=False, metadata={"yaml": "FEATURE_SECURITY_SCANNER"}
    )
    security_scanner_endpoint: str = field(
        default="", metadata={"yaml": "SECURITY_SCANNER_ENDPOINT,omitempty"}
    )
    security_scanner_indexing_interval: int = field(
        default=30, metadata={"yaml": "SECURITY_SCANNER_INDEXING_INTERVAL,omitempty"}
    )
    security_scanner_notifications: bool = field(
        default=False, metadata={"yaml": "FEATURE_SECURITY_NOTIFICATIONS"}
    )
    security_scanner_v4_endpoint: str = field(
        default="", metadata={"yaml": "SECURITY_SCANNER_V4_ENDPOINT,omitempty"}
    )
    security_scanner_v4_namespace_whitelist: list[str] = field(
        default_factory=list, metadata={"yaml": f"{_WHITELIST_KEY},omitempty"}
    )
    security_scanner_v4_psk: str = field(
        default="", metadata={"yaml": "SECURITY_SCANNER_V4_PSK,omitempty"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> SecurityScannerFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        result.feature_security_scanner = _take(
            full_config, "FEATURE_SECURITY_SCANNER", bool, "bool", result.feature_security_scanner
        )
        result.security_scanner_endpoint = _take(
            full_config,
            "SECURITY_SCANNER_ENDPOINT",
            str,
            "string",
            result.security_scanner_endpoint,
        )
        result.security_scanner_indexing_interval = _take(
            full_config,
            "SECURITY_SCANNER_INDEXING_INTERVAL",
            int,
            "int",
            result.security_scanner_indexing_interval,
        )
        result.security_scanner_notifications = _take(
            full_config,
            "SECURITY_SCANNER_NOTIFICATIONS",
            bool,
            "bool",
            result.security_scanner_notifications,
        )
        result.security_scanner_v4_endpoint = _take(
            full_config,
            "SECURITY_SCANNER_V4_ENDPOINT",
            str,
            "string",
            result.security_scanner_v4_endpoint,
        )
        result.security_scanner_v4_psk = _take(
            full_config, "SECURITY_SCANNER_V4_PSK", str, "string", result.security_scanner_v4_psk
        )
        if _WHITELIST_KEY in full_config:
            elements = full_config[_WHITELIST_KEY]
            if not isinstance(elements, list):
                raise FieldTypeError(_WHITELIST_KEY, "[]string")
            for element in elements:
                if not isinstance(element, str):
                    raise FieldTypeError(_WHITELIST_KEY, "[]string")
                result.security_scanner_v4_namespace_whitelist.append(element)
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return [
            "FEATURE_SECURITY_SCANNER",
            "SECURITY_SCANNER_ENDPOINT",
            "SECURITY_SCANNER_INDEXING_INTERVAL",
            "SECURITY_SCANNER_NOTIFICATIONS",
            "SECURITY_SCANNER_V4_ENDPOINT",
            _WHITELIST_KEY,
        ]