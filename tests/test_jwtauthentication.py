import pytest

from quayconfig.fieldgroups.jwtauthentication import JWTAuthenticationFieldGroup
from quayconfig.shared import FieldTypeError, Options


@pytest.mark.parametrize(
    "config, want",
    [
        ({"AUTHENTICATION_TYPE": "Database"}, "valid"),
        ({"AUTHENTICATION_TYPE": "JWT"}, "invalid"),
        (
            {
                "AUTHENTICATION_TYPE": "JWT",
                "JWT_AUTH_ISSUER": "one",
                "JWT_VERIFY_ENDPOINT": "https://google.com",
            },
            "valid",
        ),
        (
            {
                "AUTHENTICATION_TYPE": "JWT",
                "JWT_AUTH_ISSUER": "one",
                "JWT_VERIFY_ENDPOINT": "notagoodendpoint",
            },
            "invalid",
        ),
        ({"AUTHENTICATION_TYPE": "JWT", "JWT_VERIFY_ENDPOINT": "https://google.com"}, "invalid"),
    ],
    ids=[
        "WrongAuthType",
        "MissingVerifyEndpoint",
        "VerifyEndpointGood",
        "VerifyEndpointBad",
        "MissingAuthIssuer",
    ],
)
def test_validate_jwt_authentication(config, want):
    fg = JWTAuthenticationFieldGroup.from_config(config)
    errors = fg.validate(Options(mode="testing"))
    received = "valid" if not errors else "invalid"
    assert received == want


def test_missing_verify_endpoint_reports_each_problem():
    fg = JWTAuthenticationFieldGroup.from_config({"AUTHENTICATION_TYPE": "JWT"})
    errors = fg.validate(Options(mode="testing"))
    assert [str(e) for e in errors] == [
        "JWT_VERIFY_ENDPOINT is required",
        "JWT_VERIFY_ENDPOINT must be a url",
        "JWT_AUTH_ISSUER is required for JWT",
    ]
    assert all(e.field_group == "JWTAuthentication" for e in errors)


def test_bad_optional_endpoints_are_reported():
    fg = JWTAuthenticationFieldGroup.from_config(
        {
            "AUTHENTICATION_TYPE": "JWT",
            "JWT_AUTH_ISSUER": "one",
            "JWT_VERIFY_ENDPOINT": "https://google.com",
            "JWT_GETUSER_ENDPOINT": "getuser",
            "JWT_QUERY_ENDPOINT": "query",
        }
    )
    errors = fg.validate(Options(mode="testing"))
    assert [e.tags for e in errors] == [["JWT_GETUSER_ENDPOINT"], ["JWT_QUERY_ENDPOINT"]]
    assert errors[0].message == "JWT_GETUSER_ENDPOINT must be a url"


def test_defaults():
    fg = JWTAuthenticationFieldGroup.from_config({})
    assert fg.authentication_type == "Database"
    assert fg.feature_mailing is False
    assert fg.validate(Options()) == []


@pytest.mark.parametrize(
    "key, value, message",
    [
        ("AUTHENTICATION_TYPE", 3, "AUTHENTICATION_TYPE must be of type string"),
        ("FEATURE_MAILING", "true", "FEATURE_MAILING must be of type bool"),
        ("JWT_VERIFY_ENDPOINT", ["x"], "JWT_VERIFY_ENDPOINT must be of type string"),
    ],
)
def test_wrong_types_raise(key, value, message):
    with pytest.raises(FieldTypeError, match=message):
        JWTAuthenticationFieldGroup.from_config({key: value})


def test_fields():
    assert JWTAuthenticationFieldGroup().fields() == [
        "AUTHENTICATION_TYPE",
        "FEATURE_MAILING",
        "JWT_AUTH_ISSUER",
        "JWT_GETUSER_ENDPOINT",
        "JWT_QUERY_ENDPOINT",
        "JWT_VERIFY_ENDPOINT",
    ]