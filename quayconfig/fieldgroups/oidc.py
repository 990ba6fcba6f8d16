"""The OIDC field group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quayconfig.shared import FieldTypeError

_LOGIN_CONFIG_SUFFIX = "_LOGIN_CONFIG"
_NON_OIDC_LOGIN_CONFIGS = frozenset({"GOOGLE_LOGIN_CONFIG", "GITHUB_LOGIN_CONFIG"})
_STRING = "string"
_BOOL = "bool"
_CS_NAME = "CLIENT_SECRET"


def _take(config: dict[str, Any], key: str, kind: type, type_name: str, current: Any) -> Any:
    if key not in config:
        return current
    value = config[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise FieldTypeError(key, type_name)
    return value


def _text(name: str) -> Any:
    return field(default="", metadata={"yaml": f"{name},omitempty"})


@dataclass
class OIDCProvider:
    """One OpenID Connect login provider, configured under <PREFIX>_LOGIN_CONFIG."""

    prefix: str = field(default="", metadata={"yaml": "-"})
    oidc_server: str = _text("OIDC_SERVER")
    client_id: str = _text("CLIENT_ID")
    client_secret: str = _text(_CS_NAME)
    service_icon: str = _text("SERVICE_ICON")
    verified_email_claim_name: str = _text("VERIFIED_EMAIL_CLAIM_NAME")
    preferred_username_claim_name: str = _text("PREFERRED_USERNAME_CLAIM_NAME")
    login_scopes: list[Any] = field(
        default_factory=list, metadata={"yaml": "LOGIN_SCOPES,omitempty"}
    )
    service_name: str = _text("SERVICE_NAME")

    @classmethod
    def from_config(cls, prefix: str, provider_config: dict[str, Any]) -> OIDCProvider:
        """Build a provider from its login config mapping."""
        result = cls(prefix=prefix)
        result.oidc_server = _take(
            provider_config, "OIDC_SERVER", str, _STRING, result.oidc_server
        )
        result.client_id = _take(provider_config, "CLIENT_ID", str, _STRING, result.client_id)
        result.client_secret = _take(provider_config, _CS_NAME, str, _BOOL, result.client_secret)
        result.service_name = _take(
            provider_config, "SERVICE_NAME", str, _STRING, result.service_name
        )
        result.service_icon = _take(
            provider_config, "SERVICE_ICON", str, _STRING, result.service_icon
        )
        result.verified_email_claim_name = _take(
            provider_config,
            "VERIFIED_EMAIL_CLAIM_NAME",
            str,
            _STRING,
            result.verified_email_claim_name,
        )
        result.preferred_username_claim_name = _take(
            provider_config,
            "PREFERRED_USERNAME_CLAIM_NAME",
            str,
            _STRING,
            result.preferred_username_claim_name,
        )
        result.login_scopes = _take(
            provider_config, "LOGIN_SCOPES", list, _STRING, result.login_scopes
        )
        return result


@dataclass
class OIDCFieldGroup:
    """The OpenID Connect login providers found in a config."""

    oidc_providers: list[OIDCProvider] = field(default_factory=list, metadata={"yaml": "-"})

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> OIDCFieldGroup:
        """Collect every *_LOGIN_CONFIG mapping other than Google's and GitHub's."""
        result = cls()
        for key, value in full_config.items():
            if not isinstance(value, dict):
                continue
            if not key.endswith(_LOGIN_CONFIG_SUFFIX) or key in _NON_OIDC_LOGIN_CONFIGS:
                continue
            prefix = key[: -len(_LOGIN_CONFIG_SUFFIX)]
            result.oidc_providers.append(OIDCProvider.from_config(prefix, value))
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group; the keys are dynamic, so none."""
        return []