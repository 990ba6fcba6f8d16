import pytest

from quayconfig.fieldgroups.quaydocumentation import QuayDocumentationFieldGroup
from quayconfig.shared import FieldTypeError, Options


def _result(config):
    fg = QuayDocumentationFieldGroup.from_config(config)
    errors = fg.validate(Options(mode="testing"))
    return "valid" if not errors else "invalid"


@pytest.mark.parametrize(
    "config, want",
    [
        ({}, "valid"),
        ({"DOCUMENTATION_ROOT": "https://www.fakewebsite.com/docs"}, "valid"),
        ({"DOCUMENTATION_ROOT": "good/path"}, "invalid"),
        ({"DOCUMENTATION_ROOT": "not a url"}, "invalid"),
    ],
    ids=["NotSpecified", "ValidURL", "ValidPathURL", "InvalidURL"],
)
def test_validate_quay_documentation(config, want):
    assert _result(config) == want


@pytest.mark.parametrize(
    "root, want",
    [
        ("/docs/index.html", "valid"),
        ("https://docs.example.com:8443/guide?x=1", "valid"),
        ("https://docs.example.com:port/guide", "invalid"),
        ("https://docs.example.com/bad%zzescape", "invalid"),
        ("://docs.example.com", "invalid"),
        ("https://docs.example.com/\x01", "invalid"),
    ],
)
def test_validate_more_urls(root, want):
    assert _result({"DOCUMENTATION_ROOT": root}) == want


def test_error_details():
    fg = QuayDocumentationFieldGroup.from_config({"DOCUMENTATION_ROOT": "not a url"})
    errors = fg.validate(Options())
    assert len(errors) == 1
    assert errors[0].field_group == "QuayDocumentation"
    assert errors[0].tags == ["DOCUMENTATION_ROOT"]
    assert str(errors[0]) == "Documentation root must be a valid url."


def test_default_is_empty():
    assert QuayDocumentationFieldGroup.from_config({}).documentation_root == ""


def test_type_error():
    with pytest.raises(FieldTypeError) as info:
        QuayDocumentationFieldGroup.from_config({"DOCUMENTATION_ROOT": 7})
    assert str(info.value) == "DOCUMENTATION_ROOT must be of type string"


def test_fields():
    assert QuayDocumentationFieldGroup().fields() == ["DOCUMENTATION_ROOT"]