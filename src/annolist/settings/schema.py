"""Schema helpers for the settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_ORDERING, SETTINGS_SCHEMA_ID
from ..domain.models import StatesOrdering
from ..gui.shortcuts import DEFAULT_KEYMAP, ShortcutAction

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "annolist/settings.schema.json",
    "type": "object",
    "required": ["schema", "objects_list", "shortcuts"],
    "properties": {
        "schema": {"const": SETTINGS_SCHEMA_ID},
        "objects_list": {
            "type": "object",
            "properties": {
                "default_ordering": {
                    "type": "string",
                    "enum": [member.name for member in StatesOrdering],
                },
            },
            "additionalProperties": True,
        },
        "shortcuts": {
            "type": "object",
            "properties": {
                action.name: {"type": "string", "minLength": 1}
                for action in ShortcutAction
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": SETTINGS_SCHEMA_ID,
    "objects_list": {
        "default_ordering": DEFAULT_ORDERING,
    },
    "shortcuts": {
        action.name: binding.sequence for action, binding in DEFAULT_KEYMAP.items()
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in {"objects_list", "shortcuts"} and isinstance(value, dict):
                merged.setdefault(key, {}).update(value)
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
