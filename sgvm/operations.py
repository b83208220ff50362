"""Binary and unary operator kinds and their textual forms."""

from __future__ import annotations

from enum import IntEnum


class InternalError(Exception):
    """Raised when the virtual machine reaches a state that should be impossible."""


class BinOpType(IntEnum):
    """Binary operators. Bitwise operators take odd values, all others even."""

    ADD = 0
    SUB = 2
    MUL = 4
    DIV = 6
    MOD = 8
    LESS_THAN = 10
    GREATER_THAN = 12
    LESS_THAN_OR_EQUAL = 14
    GREATER_THAN_OR_EQUAL = 16
    NOT_EQUAL_TO = 18
    EQUAL_TO = 20


class UnaryOpType(IntEnum):
    """Unary operators."""

    NEGATE = 0


_BIN_OP_SYMBOLS = {
    BinOpType.ADD: "+",
    BinOpType.SUB: "-",
    BinOpType.MUL: "*",
    BinOpType.DIV: "/",
    BinOpType.MOD: "%",
    BinOpType.LESS_THAN: "<",
    BinOpType.GREATER_THAN: ">",
    BinOpType.LESS_THAN_OR_EQUAL: "<=",
    BinOpType.GREATER_THAN_OR_EQUAL: ">=",
    BinOpType.NOT_EQUAL_TO: "!=",
    BinOpType.EQUAL_TO: "==",
}

_UNARY_OP_SYMBOLS = {
    UnaryOpType.NEGATE: "-",
}


def bin_op_is_bitwise_operator(op: BinOpType) -> bool:
    """Return whether the binary operator works on integer bits (none do yet)."""
    return False


def unary_is_bitwise_operator(op: UnaryOpType) -> bool:
    """Return whether the unary operator works on integer bits (none do yet)."""
    return False


def bin_op_to_string(op: BinOpType | int) -> str:
    """Return the source symbol of a binary operator."""
    try:
        return _BIN_OP_SYMBOLS[BinOpType(op)]
    except (ValueError, KeyError):
        raise InternalError("Tried to convert unknown BinOpType to string") from None


def unary_op_to_string(op: UnaryOpType | int) -> str:
    """Return the source symbol of a unary operator."""
    try:
        return _UNARY_OP_SYMBOLS[UnaryOpType(op)]
    except (ValueError, KeyError):
        raise InternalError("Tried to convert unknown UnaryOpType to string") from None