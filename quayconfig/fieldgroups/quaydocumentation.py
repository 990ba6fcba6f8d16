"""The QuayDocumentation field group."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Any

from quayconfig.shared import FieldTypeError, Options, ValidationError

_FIELD_GROUP = "QuayDocumentation"
_HEX = frozenset(string.hexdigits)
_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-_.~")
_HOST_EXTRA = frozenset("!$&'()*+,;=:[]<>\"")
_USERINFO_EXTRA = frozenset("-._:~!$&'()*+,;=%@")


def _take(config: dict[str, Any], key: str, kind: type, type_name: str, current: Any) -> Any:
    if key not in config:
        return current
    value = config[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise FieldTypeError(key, type_name)
    return value


def _split_scheme(raw: str) -> tuple[str, str]:
    for index, char in enumerate(raw):
        if char.isascii() and char.isalpha():
            continue
        if (char.isascii() and char.isdigit()) or char in "+-.":
            if index == 0:
                return "", raw
            continue
        if char == ":":
            if index == 0:
                raise ValueError("missing protocol scheme")
            return raw[:index].lower(), raw[index + 1 :]
        return "", raw
    return "", raw


def _check_escapes(text: str, *, host: bool) -> None:
    index = 0
    while index < len(text):
        char = text[index]
        if char == "%":
            escape = text[index + 1 : index + 3]
            if len(escape) < 2 or not set(escape) <= _HEX:
                raise ValueError(f"invalid URL escape {text[index:index + 3]!r}")
            index += 3
            continue
        if host and char.isascii() and char not in _UNRESERVED and char not in _HOST_EXTRA:
            raise ValueError(f"invalid character {char!r} in host name")
        index += 1


def _valid_optional_port(port: str) -> bool:
    if not port:
        return True
    return port[0] == ":" and all(c in string.digits for c in port[1:])


def _check_host(host: str) -> None:
    if host.startswith("["):
        end = host.find("]")
        if end < 0:
            raise ValueError("missing ']' in host")
        port = host[end + 1 :]
    else:
        colon = host.rfind(":")
        port = host[colon:] if colon >= 0 else ""
    if not _valid_optional_port(port):
        raise ValueError(f"invalid port {port!r} after host")
    _check_escapes(host, host=True)


def _check_authority(authority: str) -> None:
    at = authority.rfind("@")
    if at >= 0:
        userinfo = authority[:at]
        if any(
            c.isascii() and c not in _UNRESERVED and c not in _USERINFO_EXTRA for c in userinfo
        ):
            raise ValueError("invalid userinfo")
        _check_escapes(userinfo, host=False)
    _check_host(authority[at + 1 :])


def _parse_request_uri(raw: str) -> None:
    """Raise ValueError unless raw is an absolute URI or an absolute path."""
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in raw):
        raise ValueError("invalid control character in URL")
    if raw == "*":
        return
    scheme, rest = _split_scheme(raw)
    if not (rest.endswith("?") and rest.count("?") == 1):
        rest = rest.split("?", 1)[0]
    else:
        rest = rest[:-1]
    if not rest.startswith("/"):
        if scheme:
            return
        raise ValueError("invalid URI for request")
    if scheme and rest.startswith("//"):
        authority, slash, path = rest[2:].partition("/")
        _check_authority(authority)
        rest = slash + path
    _check_escapes(rest, host=False)


@dataclass
class QuayDocumentationFieldGroup:
    """Where the registry's documentation links point."""

    documentation_root: str = field(
        default="", metadata={"yaml": "DOCUMENTATION_ROOT,omitempty"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> QuayDocumentationFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        result.documentation_root = _take(
            full_config, "DOCUMENTATION_ROOT", str, "string", result.documentation_root
        )
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return ["DOCUMENTATION_ROOT"]

    def validate(self, opts: Options) -> list[ValidationError]:
        """Check that a documentation root, when given, is a valid request URL."""
        errors: list[ValidationError] = []
        if not self.documentation_root:
            return errors
        try:
            _parse_request_uri(self.documentation_root)
        except ValueError:
            errors.append(
                ValidationError(
                    field_group=_FIELD_GROUP,
                    tags=["DOCUMENTATION_ROOT"],
                    message="Documentation root must be a valid url.",
                )
            )
        return errors