"""The HostSettings field group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quayconfig.shared import FieldTypeError


def _take(config: dict[str, Any], key: str, kind: type, type_name: str, current: Any) -> Any:
    if key not in config:
        return current
    value = config[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise FieldTypeError(key, type_name)
    return value


@dataclass
class HostSettingsFieldGroup:
    """Settings for the host name and URL scheme of the registry."""

    external_tls_termination: bool = field(
        default=False, metadata={"yaml": "EXTERNAL_TLS_TERMINATION"}
    )
    preferred_url_scheme: str = field(
        default="http", metadata={"yaml": "PREFERRED_URL_SCHEME,omitempty"}
    )
    server_hostname: str = field(default="", metadata={"yaml": "SERVER_HOSTNAME,omitempty"})

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> HostSettingsFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        result.external_tls_termination = _take(
            full_config, "EXTERNAL_TLS_TERMINATION", bool, "bool", result.external_tls_termination
        )
        result.preferred_url_scheme = _take(
            full_config, "PREFERRED_URL_SCHEME", str, "string", result.preferred_url_scheme
        )
        result.server_hostname = _take(
            full_config, "SERVER_HOSTNAME", str, "string", result.server_hostname
        )
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return ["EXTERNAL_TLS_TERMINATION", "PREFERRED_URL_SCHEME", "SERVER_HOSTNAME"]