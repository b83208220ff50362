"""Binary and unary operations on runtime values."""

from __future__ import annotations

import math

from .operations import (
    BinOpType,
    InternalError,
    UnaryOpType,
    bin_op_is_bitwise_operator,
    bin_op_to_string,
    unary_is_bitwise_operator,
    unary_op_to_string,
)
from .values import (
    ObjectType,
    SgRuntimeError,
    Value,
    ValueType,
    safe_get_value_object,
    value_from_number,
    value_from_string,
    value_is_numerical,
    value_to_number,
    value_to_string,
    values_are_equal,
)

_TRUE = Value(ValueType.TRUE)
_FALSE = Value(ValueType.FALSE)


def _boolean(flag: bool) -> Value:
    return _TRUE if flag else _FALSE


def _divide(a: float, b: float) -> float:
    """IEEE division: dividing by zero yields an infinity or NaN instead of raising."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fmod(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _mod(a: float, b: float) -> float:
    """The language's modulo: negative dividends wrap to a positive remainder."""
    if b == 0:
        return -math.inf if (a > 0) ^ (b > 0) else math.inf
    if a < 0:
        return b - _fmod(math.fabs(a), b)
    return _fmod(a, b)


def _as_bin_op(op: BinOpType | int) -> BinOpType:
    try:
        return BinOpType(op)
    except ValueError:
        raise InternalError("Tried to compute unknown binary operation on two values") from None


def _as_unary_op(op: UnaryOpType | int) -> UnaryOpType:
    try:
        return UnaryOpType(op)
    except ValueError:
        raise InternalError("Tried to compute unknown unary operation on value") from None


_ARITHMETIC = {
    BinOpType.ADD: lambda x, y: x + y,
    BinOpType.SUB: lambda x, y: x - y,
    BinOpType.MUL: lambda x, y: x * y,
    BinOpType.DIV: _divide,
    BinOpType.MOD: _mod,
}

_COMPARISONS = {
    BinOpType.LESS_THAN: lambda x, y: x < y,
    BinOpType.GREATER_THAN: lambda x, y: x > y,
    BinOpType.LESS_THAN_OR_EQUAL: lambda x, y: x <= y,
    BinOpType.GREATER_THAN_OR_EQUAL: lambda x, y: x >= y,
}


def bin_op(op: BinOpType | int, a: Value, b: Value) -> Value:
    """Apply a binary operator; raise SgRuntimeError if the operands do not fit it."""
    op = _as_bin_op(op)

    if op is BinOpType.ADD:
        obj_a = safe_get_value_object(a)
        obj_b = safe_get_value_object(b)
        if (
            obj_a is not None
            and obj_b is not None
            and obj_a.type is ObjectType.STRING
            and obj_b.type is ObjectType.STRING
        ):
            return value_from_string(obj_a.data + obj_b.data)

    if op is BinOpType.NOT_EQUAL_TO:
        return _boolean(not values_are_equal(a, b))
    if op is BinOpType.EQUAL_TO:
        return _boolean(values_are_equal(a, b))

    if not value_is_numerical(a) or not value_is_numerical(b):
        raise SgRuntimeError(
            f"Cannot perform binary operation {bin_op_to_string(op)} on values "
            f"{value_to_string(a)} and {value_to_string(b)}"
        )

    first = value_to_number(a)
    second = value_to_number(b)

    if bin_op_is_bitwise_operator(op):
        if first != math.floor(first) and second != math.floor(second):
            raise SgRuntimeError(
                f"Cannot perform bitwise operation {bin_op_to_string(op)} on non-integer values "
                f"{value_to_string(a)} and {value_to_string(b)}"
            )

    if op in _ARITHMETIC:
        return value_from_number(_ARITHMETIC[op](first, second))
    if op in _COMPARISONS:
        return _boolean(_COMPARISONS[op](first, second))
    raise InternalError("Tried to compute unknown binary operation on two values")


def unary_op(op: UnaryOpType | int, arg: Value) -> Value:
    """Apply a unary operator; raise SgRuntimeError if the operand does not fit it."""
    op = _as_unary_op(op)

    if not value_is_numerical(arg):
        raise SgRuntimeError(
            f"Cannot perform unary operation {unary_op_to_string(op)} on value "
            f"{value_to_string(arg)}"
        )

    num = value_to_number(arg)

    if unary_is_bitwise_operator(op) and num != math.floor(num):
        raise SgRuntimeError(
            f"Cannot perform bitwise operation {unary_op_to_string(op)} on non-integer value "
            f"{value_to_string(arg)}"
        )

    if op is UnaryOpType.NEGATE:
        return value_from_number(-num)
    raise InternalError("Tried to compute unknown unary operation on value")