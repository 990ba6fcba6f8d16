"""The GoogleLogin field group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from quayconfig.shared import FieldTypeError

_STRING = "string"
_CLIENT_ID = "CLIENT_ID"
_CS_NAME = "CLIENT_SECRET"


def _take(config: dict[str, Any], key: str, kind: type, type_name: str, current: Any) -> Any:
    if key not in config:
        return current
    value = config[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise FieldTypeError(key, type_name)
    return value


def _text(name: str, default: str = "") -> Any:
    return field(default=default, metadata={"yaml": f"{name},omitempty"})


@dataclass
class GoogleLoginConfigStruct:
    """The GOOGLE_LOGIN_CONFIG settings."""

    client_secret: str = _text(_CS_NAME)
    client_id: str = _text(_CLIENT_ID)

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> GoogleLoginConfigStruct:
        """Build the settings from a config mapping."""
        result = cls()
        result.client_secret = _take(full_config, _CS_NAME, str, _STRING, result.client_secret)
        result.client_id = _take(full_config, _CLIENT_ID, str, _STRING, result.client_id)
        return result


@dataclass
class GoogleLoginFieldGroup:
    """Settings for logging in with Google."""

    feature_google_login: bool = field(default=False, metadata={"yaml": "FEATURE_GOOGLE_LOGIN"})
    google_login_config: Optional[GoogleLoginConfigStruct] = field(
        default=None, metadata={"yaml": "GOOGLE_LOGIN_CONFIG,omitempty"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> GoogleLoginFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        result.feature_google_login = _take(
            full_config, "FEATURE_GOOGLE_LOGIN", bool, "bool", result.feature_google_login
        )
        if "GOOGLE_LOGIN_CONFIG" in full_config:
            value = full_config["GOOGLE_LOGIN_CONFIG"]
            if not isinstance(value, dict):
                raise FieldTypeError("GOOGLE_LOGIN_CONFIG", "map")
            result.google_login_config = GoogleLoginConfigStruct.from_config(value)
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return ["FEATURE_GOOGLE_LOGIN", "GOOGLE_LOGIN_CONFIG"]