"""The Console namespace: printing and terminal styling codes."""

from __future__ import annotations

import sys
from typing import Any

from ..values import (
    NativeMethod,
    Object,
    ObjectType,
    Value,
    value_from_native_method,
    value_from_object,
    value_from_string,
    value_to_string,
)

_FOREGROUND = {
    "black": "\x1b[0;30m",
    "red": "\x1b[0;31m",
    "green": "\x1b[0;32m",
    "yellow": "\x1b[0;33m",
    "blue": "\x1b[0;34m",
    "purple": "\x1b[0;35m",
    "cyan": "\x1b[0;36m",
    "white": "\x1b[0;37m",
}

_BACKGROUND = {
    "black": "\x1b[40m",
    "red": "\x1b[41m",
    "green": "\x1b[42m",
    "yellow": "\x1b[43m",
    "blue": "\x1b[44m",
    "purple": "\x1b[45m",
    "cyan": "\x1b[46m",
    "white": "\x1b[47m",
}


def _print(args: list, runtime: Any) -> Value:
    sys.stdout.write(value_to_string(args[0]))
    return Value()


def _println(args: list, runtime: Any) -> Value:
    sys.stdout.write(value_to_string(args[0]) + "\n")
    sys.stdout.flush()
    return Value()


def _string_namespace(codes: dict) -> Value:
    namespace = {name: value_from_string(code) for name, code in codes.items()}
    return value_from_object(Object(ObjectType.NAMESPACE_CONSTANT, namespace))


def create_console_namespace() -> Value:
    """Build the constant namespace holding console output functions and styles."""
    namespace = {
        "print": value_from_native_method(NativeMethod(_print, 1)),
        "println": value_from_native_method(NativeMethod(_println, 1)),
        "fg": _string_namespace(_FOREGROUND),
        "bg": _string_namespace(_BACKGROUND),
        "bold": value_from_string("\x1b[1m"),
        "underline": value_from_string("\x1b[4m"),
        "reset": value_from_string("\x1b[0m"),
    }
    return value_from_object(Object(ObjectType.NAMESPACE_CONSTANT, namespace))