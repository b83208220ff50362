import pytest

from sgvm.natives.arrays import create_array_namespace
from sgvm.values import (
    Object,
    ObjectType,
    SgRuntimeError,
    Value,
    ValueType,
    value_from_number,
    value_from_object,
    value_from_string,
)


def _native(name):
    return create_array_namespace().obj.data[name].native


def _array(*items):
    return value_from_object(Object(ObjectType.ARRAY, list(items)))


def test_namespace_shape():
    ns = create_array_namespace().obj
    assert ns.type is ObjectType.NAMESPACE_CONSTANT
    assert set(ns.data) == {"append", "includes", "length"}
    assert _native("append").number_arguments == 2
    assert _native("includes").number_arguments == 2
    assert _native("length").number_arguments == 1


def test_append_mutates_array():
    arr = _array(value_from_number(1))
    item = value_from_number(2)
    result = _native("append").func([arr, item], None)
    assert result.type is ValueType.NULL_VALUE
    assert arr.array[-1] == item
    assert len(arr.array) == 2


def test_append_to_non_array_raises():
    with pytest.raises(SgRuntimeError, match="it is not an array"):
        _native("append").func([value_from_number(3), value_from_number(1)], None)


def test_includes_compares_strings_by_content():
    arr = _array(value_from_string("a"), value_from_number(5))
    includes = _native("includes").func
    assert includes([arr, value_from_string("a")], None).type is ValueType.TRUE
    assert includes([arr, value_from_number(5)], None).type is ValueType.TRUE
    assert includes([arr, value_from_string("b")], None).type is ValueType.FALSE


def test_includes_on_string_raises():
    with pytest.raises(SgRuntimeError, match="Cannot check include in value abc"):
        _native("includes").func([value_from_string("abc"), Value()], None)


def test_length_matches_array_size():
    length = _native("length").func
    items = [value_from_number(i) for i in range(4)]
    assert length([_array(*items)], None).number == len(items)
    assert length([_array()], None).number == 0


def test_length_of_non_array_raises():
    with pytest.raises(SgRuntimeError, match="Cannot get length of value"):
        _native("length").func([Value(ValueType.TRUE)], None)


def test_append_then_length_round_trip():
    arr = _array()
    _native("append").func([arr, value_from_string("x")], None)
    assert _native("length").func([arr], None).number == 1
    assert _native("includes").func([arr, value_from_string("x")], None).type is ValueType.TRUE