"""Required/typed lookups over a plistlib document tree."""

from __future__ import annotations

import plistlib
from datetime import datetime
from typing import Any, Mapping

from .errors import InvalidType, MissingKey


UNKNOWN_KIND = "(unknown)"

# Order matters: bool is a subclass of int.
_KINDS: tuple[tuple[type | tuple[type, ...], str], ...] = (
    (list, "Array"),
    (dict, "Dictionary"),
    (bool, "Boolean"),
    ((bytes, bytearray), "Data"),
    (datetime, "Date"),
    (int, "Integer"),
    (float, "Real"),
    (str, "String"),
    (plistlib.UID, "Uid"),
)


def value_kind(value: Any) -> str:
    for types, name in _KINDS:
        if isinstance(value, types):
            return name
    return UNKNOWN_KIND


def get_required(d: Mapping[str, Any], key: str) -> Any:
    try:
        return d[key]
    except KeyError:
        raise MissingKey(key) from None


def _expect(value: Any, kind: str) -> Any:
    actual = value_kind(value)
    if actual != kind:
        raise InvalidType(kind, actual)
    return value


def expect_string(value: Any) -> str:
    return _expect(value, "String")


def expect_real(value: Any) -> float:
    return float(_expect(value, "Real"))


def expect_dictionary(value: Any) -> dict[str, Any]:
    return _expect(value, "Dictionary")
