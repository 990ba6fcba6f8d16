"""The TeamSyncing field group."""

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
class TeamSyncingFieldGroup:
    """Settings for syncing team membership from an external source."""

    feature_nonsuperuser_team_syncing_setup: bool = field(
        default=False, metadata={"yaml": "FEATURE_NONSUPERUSER_TEAM_SYNCING_SETUP"}
    )
    feature_team_syncing: bool = field(default=False, metadata={"yaml": "FEATURE_TEAM_SYNCING"})
    team_resync_stale_time: str = field(
        default="30m", metadata={"yaml": "TEAM_RESYNC_STALE_TIME,omitempty"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> TeamSyncingFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        result.feature_nonsuperuser_team_syncing_setup = _take(
            full_config,
            "FEATURE_NONSUPERUSER_TEAM_SYNCING_SETUP",
            bool,
            "bool",
            result.feature_nonsuperuser_team_syncing_setup,
        )
        result.feature_team_syncing = _take(
            full_config, "FEATURE_TEAM_SYNCING", bool, "bool", result.feature_team_syncing
        )
        result.team_resync_stale_time = _take(
            full_config, "TEAM_RESYNC_STALE_TIME", str, "string", result.team_resync_stale_time
        )
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return [
            "FEATURE_NONSUPERUSER_TEAM_SYNCING_SETUP",
            "FEATURE_TEAM_SYNCING",
            "TEAM_RESYNC_STALE_TIME",
        ]