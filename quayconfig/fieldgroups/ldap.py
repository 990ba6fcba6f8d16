"""The LDAP field group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quayconfig.shared import FieldTypeError

_STRING = "string"
_ADMIN_BIND_NAME = "LDAP_ADMIN_PASSWD"


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
class LDAPFieldGroup:
    """Settings for authenticating users against an LDAP server."""

    authentication_type: str = _text("AUTHENTICATION_TYPE", "Database")
    ldap_admin_dn: str = _text("LDAP_ADMIN_DN")
    ldap_admin_passwd: str = _text(_ADMIN_BIND_NAME)
    ldap_allow_insecure_fallback: bool = field(
        default=False, metadata={"yaml": "LDAP_ALLOW_INSECURE_FALLBACK"}
    )
    ldap_base_dn: list[Any] = field(
        default_factory=list, metadata={"yaml": "LDAP_BASE_DN,omitempty"}
    )
    ldap_email_attr: str = _text("LDAP_EMAIL_ATTR", "mail")
    ldap_uid_attr: str = _text("LDAP_UID_ATTR", "uid")
    ldap_uri: str = _text("LDAP_URI", "ldap://localhost")
    ldap_user_filter: str = _text("LDAP_USER_FILTER")
    ldap_user_rdn: list[Any] = field(
        default_factory=list, metadata={"yaml": "LDAP_USER_RDN,omitempty"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> LDAPFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        result.authentication_type = _take(
            full_config, "AUTHENTICATION_TYPE", str, _STRING, result.authentication_type
        )
        result.ldap_admin_dn = _take(
            full_config, "LDAP_ADMIN_DN", str, _STRING, result.ldap_admin_dn
        )
        result.ldap_admin_passwd = _take(
            full_config, _ADMIN_BIND_NAME, str, _STRING, result.ldap_admin_passwd
        )
        result.ldap_allow_insecure_fallback = _take(
            full_config,
            "LDAP_ALLOW_INSECURE_FALLBACK",
            bool,
            "bool",
            result.ldap_allow_insecure_fallback,
        )
        result.ldap_base_dn = _take(full_config, "LDAP_BASE_DN", list, "array", result.ldap_base_dn)
        result.ldap_email_attr = _take(
            full_config, "LDAP_EMAIL_ATTR", str, _STRING, result.ldap_email_attr
        )
        result.ldap_uid_attr = _take(
            full_config, "LDAP_UID_ATTR", str, _STRING, result.ldap_uid_attr
        )
        result.ldap_uri = _take(full_config, "LDAP_URI", str, _STRING, result.ldap_uri)
        result.ldap_user_filter = _take(
            full_config, "LDAP_USER_FILTER", str, _STRING, result.ldap_user_filter
        )
        result.ldap_user_rdn = _take(
            full_config, "LDAP_USER_RDN", list, "[]interface{}", result.ldap_user_rdn
        )
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return [
            "LDAP_ADMIN_DN",
            "LDAP_ADMIN_PASSWD",
            "LDAP_ALLOW_INSECURE_FALLBACK",
            "LDAP_BASE_DN",
            "LDAP_EMAIL_ATTR",
            "LDAP_UID_ATTR",
            "LDAP_URI",
            "LDAP_USER_FILTER",
            "LDAP_USER_RDN",
        ]