import pytest

from sgvm.operations import (
    BinOpType,
    InternalError,
    UnaryOpType,
    bin_op_is_bitwise_operator,
    bin_op_to_string,
    unary_is_bitwise_operator,
    unary_op_to_string,
)


@pytest.mark.parametrize(
    "op, symbol",
    [
        (BinOpType.ADD, "+"),
        (BinOpType.SUB, "-"),
        (BinOpType.MUL, "*"),
        (BinOpType.DIV, "/"),
        (BinOpType.MOD, "%"),
        (BinOpType.LESS_THAN, "<"),
        (BinOpType.GREATER_THAN, ">"),
        (BinOpType.LESS_THAN_OR_EQUAL, "<="),
        (BinOpType.GREATER_THAN_OR_EQUAL, ">="),
        (BinOpType.NOT_EQUAL_TO, "!="),
        (BinOpType.EQUAL_TO, "=="),
    ],
)
def test_bin_op_symbols(op, symbol):
    assert bin_op_to_string(op) == symbol


def test_bin_op_accepts_raw_int():
    assert bin_op_to_string(20) == "=="


def test_unary_symbol():
    assert unary_op_to_string(UnaryOpType.NEGATE) == "-"


def test_unknown_bin_op_raises():
    with pytest.raises(InternalError):
        bin_op_to_string(1)


def test_unknown_unary_op_raises():
    with pytest.raises(InternalError):
        unary_op_to_string(7)


def test_non_bitwise_values_are_even():
    for op in BinOpType:
        assert op.value % 2 == 0
        assert bin_op_is_bitwise_operator(op) is False


def test_unary_not_bitwise():
    assert unary_is_bitwise_operator(UnaryOpType.NEGATE) is False