# quayconfig

Typed models for the field groups of a container registry `config.yaml`,
together with helpers for loading, cleaning and checking configuration data.

Each field group turns a plain mapping (for example the result of loading
`config.yaml` with a YAML parser) into a dataclass through its
`from_config` class method. Missing keys take their defaults, and a value of
the wrong type raises `quayconfig.shared.FieldTypeError`, a `TypeError`
whose message reads like `SERVER_HOSTNAME must be of type string`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Building field groups

```python
from quayconfig.fieldgroups.hostsettings import HostSettingsFieldGroup
from quayconfig.fieldgroups.redis import RedisFieldGroup

config = {
    "SERVER_HOSTNAME": "registry.example.com",
    "PREFERRED_URL_SCHEME": "https",
    "BUILDLOGS_REDIS": {"host": "redis", "port": 6379},
    "USER_EVENTS_REDIS": {"host": "redis", "port": 6379},
}

host = HostSettingsFieldGroup.from_config(config)
print(host.server_hostname)        # registry.example.com
print(host.fields())               # YAML keys owned by this group

redis = RedisFieldGroup.from_config(config)
print(redis.buildlogs_redis.port)  # 6379
```

The field groups live under `quayconfig.fieldgroups`:

| Module | Classes |
| --- | --- |
| `googlelogin` | `GoogleLoginFieldGroup`, `GoogleLoginConfigStruct` |
| `hostsettings` | `HostSettingsFieldGroup` |
| `jwtauthentication` | `JWTAuthenticationFieldGroup` |
| `ldap` | `LDAPFieldGroup` |
| `oidc` | `OIDCFieldGroup`, `OIDCProvider` |
| `quaydocumentation` | `QuayDocumentationFieldGroup` |
| `redis` | `RedisFieldGroup`, `BuildlogsRedisStruct`, `UserEventsRedisStruct` |
| `repomirror` | `RepoMirrorFieldGroup` |
| `securityscanner` | `SecurityScannerFieldGroup` |
| `teamsyncing` | `TeamSyncingFieldGroup` |
| `timemachine` | `TimeMachineFieldGroup` |
| `uservisiblesettings` | `UserVisibleSettingsFieldGroup`, `BrandingStruct` |

Every field group has `fields()`, which returns the YAML keys it owns.
A few points worth knowing:

- `OIDCFieldGroup.from_config` collects one `OIDCProvider` for every
  `*_LOGIN_CONFIG` mapping in the config other than `GOOGLE_LOGIN_CONFIG`
  and `GITHUB_LOGIN_CONFIG`; its `fields()` is empty because those keys are
  dynamic.
- `TimeMachineFieldGroup.from_config` fills `tag_expiration_options` with
  `["0s", "1d", "1w", "2w", "4w"]` when the config does not set
  `TAG_EXPIRATION_OPTIONS`.
- Nested settings such as `GOOGLE_LOGIN_CONFIG`, `BUILDLOGS_REDIS` or
  `BRANDING` must be mappings; anything else raises `FieldTypeError`.

## Validation

Three field groups can check themselves with `validate(opts)`:
`JWTAuthenticationFieldGroup`, `QuayDocumentationFieldGroup` and
`UserVisibleSettingsFieldGroup`. Each takes an `Options` value and returns a
list of `ValidationError` entries; an empty list means the group is valid.

```python
from quayconfig.shared import Options
from quayconfig.fieldgroups.jwtauthentication import JWTAuthenticationFieldGroup

group = JWTAuthenticationFieldGroup.from_config({"AUTHENTICATION_TYPE": "JWT"})
for error in group.validate(Options(mode="testing")):
    print(error.field_group, error.tags, error)
```

- JWT settings are only checked when `AUTHENTICATION_TYPE` is `JWT`: the
  verify endpoint and the issuer are required, and the endpoints must start
  with `http://` or `https://`.
- `DOCUMENTATION_ROOT`, when set, must be an absolute URL or an absolute
  path.
- User-visible settings are checked for holding values of their declared
  types.

`ValidationError` is a dataclass with `field_group`, `tags` and `message`;
`str()` of it gives the message. `FieldGroup` is a runtime-checkable
protocol for objects that have both `validate` and `fields`.

## Helpers

`quayconfig.shared` holds the helper functions:

- `fix_interface(mapping)`: copy a mapping with every key turned into a
  string.
- `fix_numbers(mapping)`: turn floats into ints throughout nested mappings,
  in place.
- `remove_null_values(mapping)`: drop `None` values throughout nested
  mappings, in place.
- `load_certs(directory)`: read every `.crt`, `.cert`, `.key` and `.pem`
  file under a directory into a dict keyed by relative path; a missing
  directory or a read error gives an empty dict.
- `create_archive(directory, buf)`: write every file under a directory into
  a binary file object as a gzip-compressed tar archive.
- `get_tls_config(opts)`: build an `ssl.SSLContext` that trusts the system
  CAs plus every certificate in `opts.certificates` whose name starts with
  `extra_ca_certs/`; certificates that cannot be loaded are logged and
  skipped.
- `has_oidc_provider(config)`: tell whether a config declares an OIDC login
  provider, by the same rule `OIDCFieldGroup` uses.
- `get_fields(dataclass_instance)`: list the YAML tags recorded on a field
  group's dataclass fields.
- `interface_array_to_string_array(items)`: return the list, raising
  `TypeError` if any element is not a string.
- `parse_int_or_string(data)`: parse an integer written either as a JSON
  number or as a quoted JSON string.

`DistributedStorageArgs` is a dataclass holding the arguments accepted by
the different distributed storage drivers.

## What this package does not do

- It does not contact any service. Nothing here checks that an LDAP server,
  a Redis server, an OIDC provider or Google login credentials actually
  work.
- Only the three field groups listed under Validation have `validate`; the
  others only parse and type-check their settings.
- There is no command-line tool, no web interface and no way to write a
  configuration back out to YAML, and no object that gathers all field
  groups into one full configuration.