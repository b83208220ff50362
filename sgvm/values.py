"""Runtime values and heap objects of the language."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Union

from .operations import InternalError
from .utils import truncate_string


class ValueType(Enum):
    OBJ = auto()
    NUMBER = auto()
    TRUE = auto()
    FALSE = auto()
    NULL_VALUE = auto()
    PROGRAM_FUNCTION = auto()
    NATIVE_FUNCTION = auto()


class ObjectType(Enum):
    STRING = auto()
    ARRAY = auto()
    # A namespace that cannot be updated
    NAMESPACE_CONSTANT = auto()


class SgRuntimeError(Exception):
    """An error in the running program, reported to its user."""


@dataclass(frozen=True)
class NativeMethod:
    """A built-in function: ``func(args, runtime)`` returns a Value or raises SgRuntimeError."""

    func: Callable[[list, Any], "Value"]
    number_arguments: int


@dataclass(eq=False)
class Object:
    """A heap-allocated value: a string, an array of Values, or a constant namespace."""

    type: ObjectType
    data: Union[str, list, dict]
    marked_for_save: bool = field(default=False, repr=False)


@dataclass(frozen=True)
class Value:
    """A tagged value; ``payload`` depends on ``type``."""

    type: ValueType = ValueType.NULL_VALUE
    payload: Any = None

    def __post_init__(self) -> None:
        if self.type is ValueType.NUMBER:
            object.__setattr__(self, "payload", float(self.payload))

    def _expect(self, value_type: ValueType) -> Any:
        if self.type is not value_type:
            raise InternalError(f"Expected a {value_type.name} value, got {self.type.name}")
        return self.payload

    @property
    def number(self) -> float:
        return self._expect(ValueType.NUMBER)

    @property
    def obj(self) -> Object:
        return self._expect(ValueType.OBJ)

    @property
    def native(self) -> NativeMethod:
        return self._expect(ValueType.NATIVE_FUNCTION)

    @property
    def function_index(self) -> int:
        return self._expect(ValueType.PROGRAM_FUNCTION)

    @property
    def string(self) -> str:
        obj = self.obj
        if obj.type is not ObjectType.STRING:
            raise InternalError("Value is not a string")
        return obj.data

    @property
    def array(self) -> list:
        obj = self.obj
        if obj.type is not ObjectType.ARRAY:
            raise InternalError("Value is not an array")
        return obj.data


def value_from_object(obj: Object) -> Value:
    return Value(ValueType.OBJ, obj)


def value_from_number(number: float) -> Value:
    return Value(ValueType.NUMBER, number)


def value_from_native_method(native: NativeMethod) -> Value:
    return Value(ValueType.NATIVE_FUNCTION, native)


def value_from_string(text: str) -> Value:
    """Wrap text in a new string object."""
    return Value(ValueType.OBJ, Object(ObjectType.STRING, text))


def format_number(number: float) -> str:
    """Format a number with six decimals, as the language prints numbers."""
    return f"{number:f}"


_LITERAL_STRINGS = {
    ValueType.TRUE: "true",
    ValueType.FALSE: "false",
    ValueType.NULL_VALUE: "null",
    ValueType.PROGRAM_FUNCTION: "function",
    ValueType.NATIVE_FUNCTION: "[native function]",
}


def value_to_string(value: Value) -> str:
    """Render a value as the program prints it."""
    if value.type is ValueType.NUMBER:
        return format_number(value.payload)
    if value.type is ValueType.OBJ:
        return object_to_string(value.payload)
    try:
        return _LITERAL_STRINGS[value.type]
    except KeyError:
        raise InternalError("Unknown value to log as string") from None


def _join_array(items: list, render: Callable[[Value], str]) -> str:
    return "[ " + ", ".join(render(item) for item in items) + " ]"


def object_to_string(obj: Object) -> str:
    if obj.type is ObjectType.STRING:
        return obj.data
    if obj.type is ObjectType.ARRAY:
        return _join_array(obj.data, value_to_string)
    raise InternalError("Unknown object type when making string")


def object_to_debug_string(obj: Object) -> str:
    if obj.type is ObjectType.STRING:
        return '"' + truncate_string(obj.data, 36) + '"'
    if obj.type is ObjectType.ARRAY:
        return _join_array(obj.data, value_to_debug_string)
    raise InternalError("Unknown object type when making debug string")


def value_to_debug_string(value: Value) -> str:
    """Render a value for listings: strings quoted and shortened."""
    if value.type is ValueType.OBJ:
        return object_to_debug_string(value.payload)
    return value_to_string(value)


def safe_get_value_object(value: Value) -> Object | None:
    """Return the value's object, or None if it holds none."""
    return value.payload if value.type is ValueType.OBJ else None


def value_is_truthy(value: Value) -> bool:
    vt = value.type
    if vt in (ValueType.NATIVE_FUNCTION, ValueType.TRUE):
        return True
    if vt in (ValueType.FALSE, ValueType.NULL_VALUE):
        return False
    if vt is ValueType.NUMBER:
        return value.payload != 0
    if vt is ValueType.OBJ:
        obj = value.payload
        if obj.type in (ObjectType.STRING, ObjectType.ARRAY):
            return len(obj.data) > 0
        raise InternalError("Unknown object type when determining value truth")
    raise InternalError("Unknown value to get truthy value from")


def value_is_numerical(value: Value) -> bool:
    return value.type in (ValueType.NUMBER, ValueType.TRUE, ValueType.FALSE)


def value_to_number(value: Value) -> float:
    if value.type is ValueType.NUMBER:
        return value.payload
    if value.type is ValueType.TRUE:
        return 1.0
    if value.type is ValueType.FALSE:
        return 0.0
    raise InternalError("Tried to convert non-numeric value type to number")


def values_are_equal(a: Value, b: Value) -> bool:
    """Language equality: strings by content, arrays by identity."""
    if a.type is not b.type:
        return False
    if a.type is ValueType.OBJ:
        obj_a, obj_b = a.payload, b.payload
        if obj_a.type is not obj_b.type:
            return False
        if obj_a.type is ObjectType.STRING:
            return obj_a.data == obj_b.data
        if obj_a.type is ObjectType.ARRAY:
            return obj_a.data is obj_b.data
        raise InternalError("Unknown object type when determining object equality")
    if a.type is ValueType.NATIVE_FUNCTION:
        return a.payload.func is b.payload.func
    if a.type is ValueType.NUMBER:
        return a.payload == b.payload
    return True