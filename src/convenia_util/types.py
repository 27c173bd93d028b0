"""
Core types for convenia-util.

Provides the runtime type tags used by every guard and the date format
specs returned by format detection.
"""
import re
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, NamedTuple, Union


class TypeTag(str, Enum):
    """Intrinsic kinds a value can have"""
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    ARRAY = "Array"
    SET = "Set"
    NULL = "Null"
    UNDEFINED = "Undefined"
    DATE = "Date"
    REGEXP = "RegExp"
    FUNCTION = "Function"


class _Undefined:
    """Marker for a value that was never provided"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

# Order matters: bool derives from int and datetime from date.
_BUILTIN_KINDS = (
    (bool, TypeTag.BOOLEAN),
    (int, TypeTag.NUMBER),
    (float, TypeTag.NUMBER),
    (complex, TypeTag.NUMBER),
    (Decimal, TypeTag.NUMBER),
    (Fraction, TypeTag.NUMBER),
    (str, TypeTag.STRING),
    (list, TypeTag.ARRAY),
    (tuple, TypeTag.ARRAY),
    (set, TypeTag.SET),
    (frozenset, TypeTag.SET),
    (date, TypeTag.DATE),
    (re.Pattern, TypeTag.REGEXP),
    (dict, TypeTag.OBJECT),
)


def type_of(value: Any) -> TypeTag:
    """
    Get the type tag of a value.

    Subclasses of built-in types are classified by the built-in they
    derive from, so ``type_of(MyStr("a"))`` is ``TypeTag.STRING``.

    Args:
        value: Any value

    Returns:
        The TypeTag of the value
    """
    if value is None:
        return TypeTag.NULL
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    for kind, tag in _BUILTIN_KINDS:
        if isinstance(value, kind):
            return tag
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


def is_type(value: Any, tag: Union[TypeTag, str]) -> bool:
    """Check if value has the given type tag (enum member or its label)."""
    return type_of(value) == tag


class DateFormatSpec(NamedTuple):
    """Pair of patterns to parse a date-like string with"""
    date: str
    datetime: str


ISO_FORMAT = DateFormatSpec("YYYY-MM-DD", "YYYY-MM-DD HH:mm:ss")
DASH_FORMAT = DateFormatSpec("DD-MM-YYYY", "DD-MM-YYYY HH:mm:ss")
SLASH_FORMAT = DateFormatSpec("DD/MM/YYYY", "DD/MM/YYYY HH:mm:ss")
