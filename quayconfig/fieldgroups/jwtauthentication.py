"""The JWTAuthentication field group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quayconfig.shared import FieldTypeError, Options, ValidationError

_FIELD_GROUP = "JWTAuthentication"
_URL_PREFIXES = ("http://", "https://")


def _take(config: dict[str, Any], key: str, kind: type, type_name: str, current: Any) -> Any:
    if key not in config:
        return current
    value = config[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise FieldTypeError(key, type_name)
    return value


def _error(tag: str, message: str) -> ValidationError:
    return ValidationError(field_group=_FIELD_GROUP, tags=[tag], message=message)


@dataclass
class JWTAuthenticationFieldGroup:
    """Settings for authenticating users against an external JWT service."""

    authentication_type: str = field(
        default="Database", metadata={"yaml": "AUTHENTICATION_TYPE,omitempty"}
    )
    feature_mailing: bool = field(default=False, metadata={"yaml": "FEATURE_MAILING"})
    jwt_auth_issuer: str = field(default="", metadata={"yaml": "JWT_AUTH_ISSUER,omitempty"})
    jwt_getuser_endpoint: str = field(
        default="", metadata={"yaml": "JWT_GETUSER_ENDPOINT,omitempty"}
    )
    jwt_query_endpoint: str = field(default="", metadata={"yaml": "JWT_QUERY_ENDPOINT,omitempty"})
    jwt_verify_endpoint: str = field(
        default="", metadata={"yaml": "JWT_VERIFY_ENDPOINT,omitempty"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> JWTAuthenticationFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        result.authentication_type = _take(
            full_config, "AUTHENTICATION_TYPE", str, "string", result.authentication_type
        )
        result.feature_mailing = _take(
            full_config, "FEATURE_MAILING", bool, "bool", result.feature_mailing
        )
        result.jwt_auth_issuer = _take(
            full_config, "JWT_AUTH_ISSUER", str, "string", result.jwt_auth_issuer
        )
        result.jwt_getuser_endpoint = _take(
            full_config, "JWT_GETUSER_ENDPOINT", str, "string", result.jwt_getuser_endpoint
        )
        result.jwt_query_endpoint = _take(
            full_config, "JWT_QUERY_ENDPOINT", str, "string", result.jwt_query_endpoint
        )
        result.jwt_verify_endpoint = _take(
            full_config, "JWT_VERIFY_ENDPOINT", str, "string", result.jwt_verify_endpoint
        )
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return [
            "AUTHENTICATION_TYPE",
            "FEATURE_MAILING",
            "JWT_AUTH_ISSUER",
            "JWT_GETUSER_ENDPOINT",
            "JWT_QUERY_ENDPOINT",
            "JWT_VERIFY_ENDPOINT",
        ]

    def validate(self, opts: Options) -> list[ValidationError]:
        """Check the JWT settings; nothing is checked unless JWT is the auth type."""
        errors: list[ValidationError] = []
        if self.authentication_type != "JWT":
            return errors

        if not self.jwt_verify_endpoint:
            errors.append(_error("JWT_VERIFY_ENDPOINT", "JWT_VERIFY_ENDPOINT is required"))
        if not self.jwt_verify_endpoint.startswith(_URL_PREFIXES):
            errors.append(_error("JWT_VERIFY_ENDPOINT", "JWT_VERIFY_ENDPOINT must be a url"))

        for tag, value in (
            ("JWT_GETUSER_ENDPOINT", self.jwt_getuser_endpoint),
            ("JWT_QUERY_ENDPOINT", self.jwt_query_endpoint),
        ):
            if value and not value.startswith(_URL_PREFIXES):
                errors.append(_error(tag, f"{tag} must be a url"))

        if not self.jwt_auth_issuer:
            errors.append(_error("JWT_AUTH_ISSUER", "JWT_AUTH_ISSUER is required for JWT"))

        return errors