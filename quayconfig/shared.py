"""Shared types and helpers used by every field group."""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import ssl
import tarfile
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Iterator, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

_CERT_SUFFIXES = (".crt", ".cert", ".key", ".pem")
_EXTRA_CA_PREFIX = "extra_ca_certs/"
_UNSUPPORTED_LOGIN_CONFIGS = frozenset({"GOOGLE_LOGIN_CONFIG", "GITHUB_LOGIN_CONFIG"})
_OMITEMPTY = ",omitempty"


class FieldTypeError(TypeError):
    """Raised when a config value does not have the type its field requires."""

    def __init__(self, field_name: str, type_name: str) -> None:
        super().__init__(f"{field_name} must be of type {type_name}")
        self.field_name = field_name
        self.type_name = type_name


@dataclass
class Options:
    """Tells a validator how to validate."""

    mode: str = ""  # one of online, offline, testing
    certificates: dict[str, bytes] = field(default_factory=dict)


@dataclass
class ValidationError:
    """A failed field group policy."""

    field_group: str
    tags: list[str] = field(default_factory=list)
    message: str = ""

    def __str__(self) -> str:
        return self.message


@runtime_checkable
class FieldGroup(Protocol):
    """A group of config fields that can check itself."""

    def validate(self, opts: Options) -> list[ValidationError]:
        """Return the problems found with this field group's settings."""

    def fields(self) -> list[str]:
        """Return the YAML keys that belong to this field group."""


def _tagged(
    rename: Optional[str] = None,
    default: Any = "",
    *,
    omitempty: bool = True,
    factory: Any = None,
) -> Any:
    """Declare a field whose YAML name is its own name unless renamed."""
    metadata = {"yaml_name": rename, "omitempty": omitempty}
    if factory is not None:
        return field(default_factory=factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _yaml_tag(f: dataclasses.Field) -> str:
    if "yaml" in f.metadata:
        return f.metadata["yaml"]
    if "omitempty" in f.metadata:
        name = f.metadata.get("yaml_name") or f.name
        return name + _OMITEMPTY if f.metadata["omitempty"] else name
    return ""


_TEMP_URL_NAME = "temp_url_key"


@dataclass
class DistributedStorageArgs:
    """Arguments accepted by the distributed storage drivers."""

    # RHOCSStorage, RadosGWStorage
    hostname: str = _tagged()
    port: int = _tagged(default=0)
    is_secure: bool = _tagged(default=False, omitempty=False)
    storage_path: str = _tagged()
    access_key: str = _tagged()
    secret_key: str = _tagged()
    bucket_name: str = _tagged()
    # S3Storage
    s3_bucket: str = _tagged()
    s3_access_key: str = _tagged()
    s3_secret_key: str = _tagged()
    host: str = _tagged()
    # AzureStorage
    azure_container: str = _tagged()
    azure_account_name: str = _tagged()
    azure_account_key: str = _tagged()
    sas_token: str = _tagged()
    # Cloudfront
    cloudfront_distribution_domain: str = _tagged()
    cloudfront_key_id: str = _tagged()
    # SwiftStorage
    swift_auth_version: int = _tagged("auth_version", 0)
    swift_auth_url: str = _tagged("auth_url")
    swift_container: str = _tagged()
    swift_user: str = _tagged()
    swift_password: str = _tagged()
    swift_ca_cert_path: str = _tagged("ca_cert_path")
    swift_temp_url_key: str = _tagged(_TEMP_URL_NAME)
    swift_os_options: dict[str, Any] = _tagged("os_options", factory=dict)


def _format_key(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "<nil>"
    return str(key)


def fix_interface(input: dict[Any, Any]) -> dict[str, Any]:
    """Return a copy of a mapping with every key turned into a string."""
    return {_format_key(key): value for key, value in input.items()}


def get_fields(fg: Any) -> list[str]:
    """Return the YAML tag of every field of a field group dataclass."""
    if not dataclasses.is_dataclass(fg):
        raise TypeError(f"{type(fg).__name__} is not a field group dataclass")
    return [_yaml_tag(f) for f in dataclasses.fields(fg)]


def _walk_files(root: str) -> Iterator[str]:
    """Yield every non-directory path under root in lexical order."""
    if not os.path.isdir(root) or os.path.islink(root):
        yield root
        return
    for entry in sorted(os.scandir(root), key=lambda e: e.name):
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(entry.path)
        else:
            yield entry.path


def load_certs(directory: str | os.PathLike[str]) -> dict[str, bytes]:
    """Load the certificate and key files found under a config directory."""
    directory = os.fspath(directory)
    if not os.path.exists(directory):
        return {}

    certs: dict[str, bytes] = {}
    try:
        for path in _walk_files(directory):
            if ".." in path or not path.endswith(_CERT_SUFFIXES):
                continue
            with open(path, "rb") as handle:
                certs[os.path.relpath(path, directory)] = handle.read()
    except OSError:
        return {}
    return certs


def create_archive(directory: str | os.PathLike[str], buf: BinaryIO) -> None:
    """Write a gzipped tar of every file under directory into buf."""
    directory = os.fspath(directory)
    if not os.path.exists(directory):
        raise FileNotFoundError(directory)

    files = list(_walk_files(directory))
    with tarfile.open(fileobj=buf, mode="w:gz") as archive:
        for path in files:
            with open(path, "rb") as handle:
                info = archive.gettarinfo(arcname=path, fileobj=handle)
                archive.addfile(info, handle)


def fix_numbers(m: dict[str, Any]) -> dict[str, Any]:
    """Turn every float in a nested mapping into an int, in place."""
    for key, value in m.items():
        if isinstance(value, dict):
            fix_numbers(value)
        elif isinstance(value, float):
            m[key] = int(value)
    return m


def remove_null_values(m: dict[str, Any]) -> dict[str, Any]:
    """Drop every None value from a nested mapping, in place."""
    for key in list(m):
        value = m[key]
        if isinstance(value, dict):
            remove_null_values(value)
        elif value is None:
            del m[key]
    return m


def interface_array_to_string_array(input: list[Any]) -> list[str]:
    """Return the list, checking that every element is a string."""
    for element in input:
        if not isinstance(element, str):
            raise TypeError(f"expected a string, got {type(element).__name__}")
    return list(input)


def get_tls_config(opts: Options) -> ssl.SSLContext:
    """Build a TLS context trusting the system CAs and any extra CA certs."""
    context = ssl.create_default_context()
    for name, cert in opts.certificates.items():
        if not name.startswith(_EXTRA_CA_PREFIX):
            continue
        try:
            context.load_verify_locations(cadata=cert.decode("ascii"))
        except (ssl.SSLError, ValueError, UnicodeDecodeError):
            logger.warning("Could not load extra ca cert file: %s. Skipping.", name)
    return context


def has_oidc_provider(full_config: dict[str, Any]) -> bool:
    """Tell whether a config holds an OIDC login provider."""
    return any(
        isinstance(value, dict)
        and key.endswith("_LOGIN_CONFIG")
        and key not in _UNSUPPORTED_LOGIN_CONFIGS
        for key, value in full_config.items()
    )


def parse_int_or_string(data: bytes | str) -> int:
    """Parse an int given either as a JSON number or as a JSON string."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    try:
        value = json.loads(data.strip('"'))
    except json.JSONDecodeError as exc:
        raise ValueError(f"cannot parse {data!r} as an integer") from exc
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot parse {data!r} as an integer")
    return value