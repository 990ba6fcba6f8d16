import pytest

from quayconfig.fieldgroups.securityscanner import SecurityScannerFieldGroup
from quayconfig.shared import FieldTypeError


def test_defaults_from_empty_config():
    fg = SecurityScannerFieldGroup.from_config({})
    assert fg.feature_security_scanner is False
    assert fg.security_scanner_endpoint == ""
    assert fg.security_scanner_indexing_interval == 30
    assert fg.security_scanner_notifications is False
    assert fg.security_scanner_v4_endpoint == ""
    assert fg.security_scanner_v4_namespace_whitelist == []
    assert fg.security_scanner_v4_psk == ""


def test_values_are_read():
    config = {
        "FEATURE_SECURITY_SCANNER": True,
        "SECURITY_SCANNER_ENDPOINT": "https://www.google.com:443",
        "SECURITY_SCANNER_INDEXING_INTERVAL": 60,
        "SECURITY_SCANNER_NOTIFICATIONS": True,
        "SECURITY_SCANNER_V4_ENDPOINT": "http://clair.example.com",
        "SECURITY_SCANNER_V4_PSK": "secret",
        "SECURITY_SCANNER_V4_NAMESPACE_WHITELIST": ["admin", "team"],
    }
    fg = SecurityScannerFieldGroup.from_config(config)
    assert fg.feature_security_scanner is True
    assert fg.security_scanner_endpoint == config["SECURITY_SCANNER_ENDPOINT"]
    assert fg.security_scanner_indexing_interval == config["SECURITY_SCANNER_INDEXING_INTERVAL"]
    assert fg.security_scanner_notifications is True
    assert fg.security_scanner_v4_endpoint == config["SECURITY_SCANNER_V4_ENDPOINT"]
    assert fg.security_scanner_v4_psk == config["SECURITY_SCANNER_V4_PSK"]
    assert fg.security_scanner_v4_namespace_whitelist == ["admin", "team"]


def test_whitelist_is_a_copy():
    whitelist = ["admin"]
    fg = SecurityScannerFieldGroup.from_config(
        {"SECURITY_SCANNER_V4_NAMESPACE_WHITELIST": whitelist}
    )
    whitelist.append("other")
    assert fg.security_scanner_v4_namespace_whitelist == ["admin"]


def test_notifications_yaml_key_is_not_read():
    fg = SecurityScannerFieldGroup.from_config({"FEATURE_SECURITY_NOTIFICATIONS": True})
    assert fg.security_scanner_notifications is False


@pytest.mark.parametrize(
    "key, value, message",
    [
        ("FEATURE_SECURITY_SCANNER", "true", "FEATURE_SECURITY_SCANNER must be of type bool"),
        ("SECURITY_SCANNER_ENDPOINT", 1, "SECURITY_SCANNER_ENDPOINT must be of type string"),
        (
            "SECURITY_SCANNER_INDEXING_INTERVAL",
            "30",
            "SECURITY_SCANNER_INDEXING_INTERVAL must be of type int",
        ),
        (
            "SECURITY_SCANNER_NOTIFICATIONS",
            "no",
            "SECURITY_SCANNER_NOTIFICATIONS must be of type bool",
        ),
        ("SECURITY_SCANNER_V4_ENDPOINT", [], "SECURITY_SCANNER_V4_ENDPOINT must be of type string"),
        ("SECURITY_SCANNER_V4_PSK", 7, "SECURITY_SCANNER_V4_PSK must be of type string"),
        (
            "SECURITY_SCANNER_V4_NAMESPACE_WHITELIST",
            ["ok", 3],
            "SECURITY_SCANNER_V4_NAMESPACE_WHITELIST must be of type []string",
        ),
        (
            "SECURITY_SCANNER_V4_NAMESPACE_WHITELIST",
            "admin",
            "SECURITY_SCANNER_V4_NAMESPACE_WHITELIST must be of type []string",
        ),
    ],
)
def test_wrong_types_raise(key, value, message):
    with pytest.raises(FieldTypeError) as info:
        SecurityScannerFieldGroup.from_config({key: value})
    assert str(info.value) == message
    assert info.value.field_name == key


def test_fields_match_yaml_keys():
    fg = SecurityScannerFieldGroup.from_config({})
    assert fg.fields() == [
        "FEATURE_SECURITY_SCANNER",
        "SECURITY_SCANNER_ENDPOINT",
        "SECURITY_SCANNER_INDEXING_INTERVAL",
        "SECURITY_SCANNER_NOTIFICATIONS",
        "SECURITY_SCANNER_V4_ENDPOINT",
        "SECURITY_SCANNER_V4_NAMESPACE_WHITELIST",
    ]