from sgvm.natives.dates import create_date_namespace
from sgvm.time_utils import get_timezone_name
from sgvm.values import ObjectType, ValueType


class _RecordingRuntime:
    def __init__(self):
        self.objects = []

    def add_object(self, obj):
        self.objects.append(obj)


def test_namespace_shape():
    namespace = create_date_namespace()
    assert namespace.obj.type is ObjectType.NAMESPACE_CONSTANT
    assert set(namespace.obj.data) == {"timezoneName"}


def test_timezone_name_takes_no_arguments():
    native = create_date_namespace().obj.data["timezoneName"]
    assert native.type is ValueType.NATIVE_FUNCTION
    assert native.native.number_arguments == 0


def test_timezone_name_returns_registered_string():
    runtime = _RecordingRuntime()
    native = create_date_namespace().obj.data["timezoneName"].native
    result = native.func([], runtime)
    assert result.string == get_timezone_name()
    assert runtime.objects == [result.obj]


def test_each_namespace_is_fresh():
    first = create_date_namespace()
    second = create_date_namespace()
    assert first.obj is not second.obj
    assert first.obj.data.keys() == second.obj.data.keys()