"""The Redis field group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, TypeVar

from quayconfig.shared import FieldTypeError

_S = TypeVar("_S", bound="_RedisSettings")
_STRING = "string"


def _take(config: dict[str, Any], key: str, kind: type, type_name: str, current: Any) -> Any:
    if key not in config:
        return current
    value = config[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise FieldTypeError(key, type_name)
    return value


def _opt(name: str, default: Any) -> Any:
    return field(default=default, metadata={"yaml": f"{name},omitempty"})


@dataclass
class _RedisSettings:
    password: str = _opt("password", "")
    port: int = _opt("port", 0)
    host: str = _opt("host", "")
    ssl: bool = _opt("ssl", False)


def _parse_settings(cls: type[_S], full_config: dict[str, Any]) -> _S:
    result = cls()
    result.password = _take(full_config, "password", str, _STRING, result.password)
    result.port = _take(full_config, "port", int, "int", result.port)
    result.host = _take(full_config, "host", str, _STRING, result.host)
    result.ssl = _take(full_config, "ssl", bool, "bool", result.ssl)
    return result


@dataclass
class BuildlogsRedisStruct(_RedisSettings):
    """Connection settings for the build logs Redis."""

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> BuildlogsRedisStruct:
        """Build the connection settings from a config mapping."""
        return _parse_settings(cls, full_config)


@dataclass
class UserEventsRedisStruct(_RedisSettings):
    """Connection settings for the user events Redis."""

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> UserEventsRedisStruct:
        """Build the connection settings from a config mapping."""
        return _parse_settings(cls, full_config)


def _mapping(config: dict[str, Any], key: str) -> Optional[dict[str, Any]]:
    if key not in config:
        return None
    value = config[key]
    if not isinstance(value, dict):
        raise FieldTypeError(key, "map")
    return value


@dataclass
class RedisFieldGroup:
    """The Redis servers used for build logs and user events."""

    buildlogs_redis: Optional[BuildlogsRedisStruct] = field(
        default=None, metadata={"yaml": "BUILDLOGS_REDIS,omitempty"}
    )
    user_events_redis: Optional[UserEventsRedisStruct] = field(
        default=None, metadata={"yaml": "USER_EVENTS_REDIS,omitempty"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> RedisFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        buildlogs = _mapping(full_config, "BUILDLOGS_REDIS")
        if buildlogs is not None:
            result.buildlogs_redis = BuildlogsRedisStruct.from_config(buildlogs)
        user_events = _mapping(full_config, "USER_EVENTS_REDIS")
        if user_events is not None:
            result.user_events_redis = UserEventsRedisStruct.from_config(user_events)
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return ["BUILDLOGS_REDIS", "USER_EVENTS_REDIS"]