"""The Array namespace of built-in functions."""

from __future__ import annotations

from typing import Any

from ..values import (
    NativeMethod,
    Object,
    ObjectType,
    SgRuntimeError,
    Value,
    ValueType,
    safe_get_value_object,
    value_from_native_method,
    value_from_number,
    value_from_object,
    value_to_string,
    values_are_equal,
)


def _check_array(process: str, value: Value) -> list:
    obj = safe_get_value_object(value)
    if obj is None or obj.type is not ObjectType.ARRAY:
        raise SgRuntimeError(
            f"Cannot {process} value {value_to_string(value)} -- it is not an array"
        )
    return obj.data


def _append(args: list, runtime: Any) -> Value:
    _check_array("append to", args[0]).append(args[1])
    return Value()


def _includes(args: list, runtime: Any) -> Value:
    array = _check_array("check include in", args[0])
    found = any(values_are_equal(args[1], element) for element in array)
    return Value(ValueType.TRUE if found else ValueType.FALSE)


def _length(args: list, runtime: Any) -> Value:
    return value_from_number(len(_check_array("get length of", args[0])))


def create_array_namespace() -> Value:
    """Build the constant namespace holding the array functions."""
    namespace = {
        "append": value_from_native_method(NativeMethod(_append, 2)),
        "includes": value_from_native_method(NativeMethod(_includes, 2)),
        "length": value_from_native_method(NativeMethod(_length, 1)),
    }
    return value_from_object(Object(ObjectType.NAMESPACE_CONSTANT, namespace))