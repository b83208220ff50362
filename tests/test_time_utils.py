from sgvm.time_utils import get_timezone_name, time_in_millis, time_in_nanoseconds


def test_millis_consistent_with_nanoseconds():
    before = time_in_nanoseconds() // 1_000_000
    millis = time_in_millis()
    after = time_in_nanoseconds() // 1_000_000
    assert before <= millis <= after


def test_nanoseconds_do_not_go_backwards():
    a = time_in_nanoseconds()
    b = time_in_nanoseconds()
    assert b >= a


def test_timezone_from_environment(monkeypatch):
    monkeypatch.setenv("TZ", "Europe/Paris")
    assert get_timezone_name() == "Europe/Paris"


def test_timezone_strips_leading_colon(monkeypatch):
    monkeypatch.setenv("TZ", ":America/New_York")
    assert get_timezone_name() == "America/New_York"


def test_timezone_without_environment(monkeypatch):
    monkeypatch.delenv("TZ", raising=False)
    name = get_timezone_name()
    assert len(name) > 0
    assert not name.startswith(":")