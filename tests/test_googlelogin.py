import pytest

from quayconfig.fieldgroups.googlelogin import GoogleLoginConfigStruct, GoogleLoginFieldGroup
from quayconfig.shared import FieldTypeError, get_fields


def test_defaults_from_empty_config():
    fg = GoogleLoginFieldGroup.from_config({})
    assert fg.feature_google_login is False
    assert fg.google_login_config is None


def test_parses_full_config():
    fg = GoogleLoginFieldGroup.from_config(
        {
            "FEATURE_GOOGLE_LOGIN": True,
            "GOOGLE_LOGIN_CONFIG": {"CLIENT_ID": "client-id", "CLIENT_SECRET": "secret"},
        }
    )
    assert fg.feature_google_login is True
    assert fg.google_login_config == GoogleLoginConfigStruct(client_secret="secret", client_id="client-id")


def test_config_struct_partial():
    conf = GoogleLoginConfigStruct.from_config({"CLIENT_ID": "client-id"})
    assert conf.client_id == "client-id"
    assert conf.client_secret == ""


def test_feature_flag_must_be_bool():
    with pytest.raises(FieldTypeError) as info:
        GoogleLoginFieldGroup.from_config({"FEATURE_GOOGLE_LOGIN": "yes"})
    assert str(info.value) == "FEATURE_GOOGLE_LOGIN must be of type bool"


@pytest.mark.parametrize("key", ["CLIENT_ID", "CLIENT_SECRET"])
def test_config_values_must_be_strings(key):
    with pytest.raises(FieldTypeError) as info:
        GoogleLoginConfigStruct.from_config({key: 5})
    assert str(info.value) == f"{key} must be of type string"


def test_config_must_be_mapping():
    with pytest.raises(FieldTypeError):
        GoogleLoginFieldGroup.from_config({"GOOGLE_LOGIN_CONFIG": ["a"]})


def test_fields():
    fg = GoogleLoginFieldGroup()
    assert fg.fields() == ["FEATURE_GOOGLE_LOGIN", "GOOGLE_LOGIN_CONFIG"]


def test_yaml_tags_match_fields():
    fg = GoogleLoginFieldGroup()
    tags = [tag.split(",")[0] for tag in get_fields(fg)]
    assert tags == fg.fields()