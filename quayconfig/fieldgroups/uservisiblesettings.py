"""The UserVisibleSettings field group."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional

from quayconfig.shared import FieldTypeError, Options, ValidationError

_FIELD_GROUP = "UserVisibleSettings"
_DEFAULT_LOGO = "/static/img/quay-horizontal-color.svg"
_DEFAULT_TITLE = "Project Quay"

# Attribute, expected type and the type's name in messages.
_TYPED_FIELDS = (
    ("avatar_kind", str, "string"),
    ("contact_info", list, "[]interface{}"),
    ("registry_title", str, "string"),
    ("registry_title_short", str, "string"),
    ("search_max_result_page_count", int, "int"),
    ("search_results_per_page", int, "int"),
    ("enterprise_logo_url", str, "string"),
)


def _is_kind(value: Any, kind: type) -> bool:
    return isinstance(value, kind) and (kind is bool or not isinstance(value, bool))


def _take(config: dict[str, Any], key: str, kind: type, type_name: str, current: Any) -> Any:
    if key not in config:
        return current
    value = config[key]
    if not _is_kind(value, kind):
        raise FieldTypeError(key, type_name)
    return value


@dataclass
class BrandingStruct:
    """The BRANDING settings: logo and footer of the web interface."""

    logo: str = field(default=_DEFAULT_LOGO, metadata={"yaml": "logo,omitempty"})
    footer_img: str = field(default="", metadata={"yaml": "footer_img,omitempty"})
    footer_url: str = field(default="", metadata={"yaml": "footer_url,omitempty"})

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> BrandingStruct:
        """Build the branding settings from a config mapping."""
        result = cls()
        result.logo = _take(full_config, "logo", str, "string", result.logo)
        result.footer_img = _take(full_config, "footer_img", str, "string", result.footer_img)
        result.footer_url = _take(full_config, "footer_url", str, "string", result.footer_url)
        return result


@dataclass
class UserVisibleSettingsFieldGroup:
    """Settings that change what users see in the web interface."""

    avatar_kind: str = field(default="local", metadata={"yaml": "AVATAR_KIND,omitempty"})
    branding: Optional[BrandingStruct] = field(
        default=None, metadata={"yaml": "BRANDING,omitempty"}
    )
    contact_info: list[Any] = field(
        default_factory=list, metadata={"yaml": "CONTACT_INFO,omitempty"}
    )
    registry_title: str = field(
        default=_DEFAULT_TITLE, metadata={"yaml": "REGISTRY_TITLE,omitempty"}
    )
    registry_title_short: str = field(
        default=_DEFAULT_TITLE, metadata={"yaml": "REGISTRY_TITLE_SHORT,omitempty"}
    )
    search_max_result_page_count: int = field(
        default=10, metadata={"yaml": "SEARCH_MAX_RESULT_PAGE_COUNT,omitempty"}
    )
    search_results_per_page: int = field(
        default=10, metadata={"yaml": "SEARCH_RESULTS_PER_PAGE,omitempty"}
    )
    enterprise_logo_url: str = field(
        default="", metadata={"yaml": "ENTERPRISE_LOGO_URL,omitempty"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> UserVisibleSettingsFieldGroup:
        """Build the field group from a full config mapping."""
        result = cls()
        result.avatar_kind = _take(full_config, "AVATAR_KIND", str, "string", result.avatar_kind)
        if "BRANDING" in full_config:
            branding = full_config["BRANDING"]
            if not isinstance(branding, dict):
                raise FieldTypeError("BRANDING", "map")
            result.branding = BrandingStruct.from_config(branding)
        result.contact_info = _take(
            full_config, "CONTACT_INFO", list, "[]interface{}", result.contact_info
        )
        result.registry_title = _take(
            full_config, "REGISTRY_TITLE", str, "string", result.registry_title
        )
        result.registry_title_short = _take(
            full_config, "REGISTRY_TITLE_SHORT", str, "string", result.registry_title_short
        )
        result.search_max_result_page_count = _take(
            full_config,
            "SEARCH_MAX_RESULT_PAGE_COUNT",
            int,
            "int",
            result.search_max_result_page_count,
        )
        result.search_results_per_page = _take(
            full_config, "SEARCH_RESULTS_PER_PAGE", int, "int", result.search_results_per_page
        )
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return [
            "AVATAR_KIND",
            "BRANDING",
            "CONTACT_INFO",
            "REGISTRY_TITLE",
            "REGISTRY_TITLE_SHORT",
            "SEARCH_MAX_RESULT_PAGE_COUNT",
            "SEARCH_RESULTS_PER_PAGE",
        ]

    def validate(self, opts: Options) -> list[ValidationError]:
        """Check that every setting holds a value of its declared type."""
        tags = {
            f.name: f.metadata["yaml"].partition(",")[0] for f in dataclasses.fields(self)
        }
        errors: list[ValidationError] = []
        for name, kind, type_name in _TYPED_FIELDS:
            if _is_kind(getattr(self, name), kind):
                continue
            tag = tags[name]
            errors.append(
                ValidationError(
                    field_group=_FIELD_GROUP,
                    tags=[tag],
                    message=f"{tag} must be of type {type_name}",
                )
            )
        if self.branding is not None and not isinstance(self.branding, BrandingStruct):
            errors.append(
                ValidationError(
                    field_group=_FIELD_GROUP,
                    tags=[tags["branding"]],
                    message=f"{tags['branding']} must be of type map",
                )
            )
        return errors