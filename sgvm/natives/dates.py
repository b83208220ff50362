"""The Date namespace of built-in values."""

from __future__ import annotations

from typing import Any

from ..time_utils import get_timezone_name
from ..values import (
    NativeMethod,
    Object,
    ObjectType,
    Value,
    value_from_native_method,
    value_from_object,
)


def _timezone_name(args: list, runtime: Any) -> Value:
    obj = Object(ObjectType.STRING, get_timezone_name())
    runtime.add_object(obj)
    return value_from_object(obj)


def create_date_namespace() -> Value:
    """Build the constant namespace holding the date functions."""
    namespace = {
        "timezoneName": value_from_native_method(NativeMethod(_timezone_name, 0)),
    }
    return value_from_object(Object(ObjectType.NAMESPACE_CONSTANT, namespace))