"""Generic structural validation, independent of the object kind."""
from __future__ import annotations

from typing import Any

from .errors import AssertionMismatch
from .verification import identifiers_of, name_of


class StructuralValidator:
    """Checks that any identified object is well formed.

    Only structure is checked: a non-empty name, well-formed identifiers and,
    for objects serialisable to PROJJSON, a ``type`` member.
    """

    def validate(self, obj: Any) -> None:
        if obj is None:
            return
        name = name_of(obj)
        if not isinstance(name, str) or not name.strip():
            raise AssertionMismatch("name", "a non-empty name", name)
        for codespace, code in identifiers_of(obj):
            if not codespace or codespace == "None" or not code or code == "None":
                raise AssertionMismatch("identifiers", "codespace and code", (codespace, code))
        to_json = getattr(obj, "to_json_dict", None)
        if to_json is not None:
            data = to_json()
            if not isinstance(data, dict) or "type" not in data:
                raise AssertionMismatch("to_json_dict()", "a mapping with a 'type' member", data)


DEFAULT_VALIDATOR = StructuralValidator()
