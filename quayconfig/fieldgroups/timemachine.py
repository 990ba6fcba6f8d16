"""The TimeMachine field group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quayconfig.shared import FieldTypeError

_DEFAULT_EXPIRATION_OPTIONS = ("0s", "1d", "1w", "2w", "4w")


def _take(config: dict[str, Any], key: str, kind: type, type_name: str, current: Any) -> Any:
    if key not in config:
        return current
    value = config[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise FieldTypeError(key, type_name)
    return value


@dataclass
class TimeMachineFieldGroup:
    """Settings for how long deleted tags stay recoverable."""

    default_tag_expiration: str = field(
        default="2w", metadata={"yaml": "DEFAULT_TAG_EXPIRATION,omitempty"}
    )
    feature_change_tag_expiration: bool = field(
        default=True, metadata={"yaml": "FEATURE_CHANGE_TAG_EXPIRATION"}
    )
    tag_expiration_options: list[Any] = field(
        default_factory=list, metadata={"yaml": "TAG_EXPIRATION_OPTIONS,omitempty"}
    )

    @classmethod
    def from_config(cls, full_config: dict[str, Any]) -> TimeMachineFieldGroup:
        """Build the field group; absent expiration options get the standard set."""
        result = cls()
        result.default_tag_expiration = _take(
            full_config, "DEFAULT_TAG_EXPIRATION", str, "string", result.default_tag_expiration
        )
        result.feature_change_tag_expiration = _take(
            full_config,
            "FEATURE_CHANGE_TAG_EXPIRATION",
            bool,
            "bool",
            result.feature_change_tag_expiration,
        )
        if "TAG_EXPIRATION_OPTIONS" in full_config:
            result.tag_expiration_options = _take(
                full_config,
                "TAG_EXPIRATION_OPTIONS",
                list,
                "[]interface{}",
                result.tag_expiration_options,
            )
        else:
            result.tag_expiration_options = list(_DEFAULT_EXPIRATION_OPTIONS)
        return result

    def fields(self) -> list[str]:
        """Return the YAML keys in this field group."""
        return [
            "DEFAULT_TAG_EXPIRATION",
            "FEATURE_CHANGE_TAG_EXPIRATION",
            "TAG_EXPIRATION_OPTIONS",
        ]