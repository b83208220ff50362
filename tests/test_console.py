from sgvm.natives.console import create_console_namespace
from sgvm.values import (
    Object,
    ObjectType,
    ValueType,
    value_from_number,
    value_from_object,
    value_from_string,
    value_to_string,
)


def _ns():
    return create_console_namespace().obj.data


def test_namespace_keys():
    ns = create_console_namespace().obj
    assert ns.type is ObjectType.NAMESPACE_CONSTANT
    assert set(ns.data) == {"print", "println", "fg", "bg", "bold", "underline", "reset"}


def test_print_functions_take_one_argument():
    assert _ns()["print"].native.number_arguments == 1
    assert _ns()["println"].native.number_arguments == 1


def test_style_codes():
    ns = _ns()
    assert ns["bold"].string == "\x1b[1m"
    assert ns["underline"].string == "\x1b[4m"
    assert ns["reset"].string == "\x1b[0m"


def test_color_namespaces():
    ns = _ns()
    fg = ns["fg"].obj
    bg = ns["bg"].obj
    assert fg.type is ObjectType.NAMESPACE_CONSTANT
    assert fg.data["red"].string == "\x1b[0;31m"
    assert bg.data["white"].string == "\x1b[47m"
    assert set(fg.data) == set(bg.data)


def test_print_writes_without_newline(capsys):
    result = _ns()["print"].native.func([value_from_string("hi")], None)
    assert capsys.readouterr().out == "hi"
    assert result.type is ValueType.NULL_VALUE


def test_println_writes_value_string(capsys):
    value = value_from_number(2)
    _ns()["println"].native.func([value], None)
    assert capsys.readouterr().out == value_to_string(value) + "\n"


def test_println_array(capsys):
    arr = value_from_object(Object(ObjectType.ARRAY, [value_from_string("a")]))
    _ns()["println"].native.func([arr], None)
    assert capsys.readouterr().out == "[ a ]\n"