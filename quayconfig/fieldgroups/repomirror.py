"""The RepoMirror field group."""

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
class RepoMirrorFieldGroup:
    """Settings for mirroring repositories from other registries."""

    feature_repo_mirror: bool = field(default=False, metadata={"yaml": "FEATURE_REPO_MIRROR"})
    repo_mirror_interval: int = field(
        default=30, metadata={"yaml": "REPO_MIRROR_INTERVAL,omitempty"}
    )
    repo_mirror_server_hostname: str = field(
        default="", metadata={"yaml": "REPO_MIRROR_SERVER_HOSTNAME,omitempty"}
    )
    repo_mirror_tls_verify: bool = field(
        default=True, metadata={"yaml": "REPO_MIRROR_TLS_VERIFY"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> RepoMirrorFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        result.feature_repo_mirror = _take(
            full_config, "FEATURE_REPO_MIRROR", bool, "bool", result.feature_repo_mirror
        )
        result.repo_mirror_interval = _take(
            full_config, "REPO_MIRROR_INTERVAL", int, "int", result.repo_mirror_interval
        )
        result.repo_mirror_server_hostname = _take(
            full_config,
            "REPO_MIRROR_SERVER_HOSTNAME",
            str,
            "string",
            result.repo_mirror_server_hostname,
        )
        result.repo_mirror_tls_verify = _take(
            full_config, "REPO_MIRROR_TLS_VERIFY", bool, "bool", result.repo_mirror_tls_verify
        )
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return [
            "FEATURE_REPO_MIRROR",
            "REPO_MIRROR_INTERVAL",
            "REPO_MIRROR_SERVER_HOSTNAME",
            "REPO_MIRROR_TLS_VERIFY",
        ]