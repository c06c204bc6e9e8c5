import pytest

from sckit import clock

# 2020-09-13T12:26:40Z, well before any machine running these tests.
_EPOCH_FLOOR_S = 1_600_000_000


def test_wall_clock_is_nonzero():
    assert clock.now_ns() > _EPOCH_FLOOR_S * 1_000_000_000
    assert clock.now_ms() > _EPOCH_FLOOR_S * 1000


def test_wall_clock_units_agree():
    ms = clock.now_ms()
    ns = clock.now_ns()
    assert 0 <= ns // 1_000_000 - ms < 1000


def test_mono_ms_never_goes_back():
    for _ in range(10000):
        t1 = clock.mono_ms()
        t2 = clock.mono_ms()
        assert t2 >= t1


def test_mono_ns_never_goes_back():
    for _ in range(10000):
        t1 = clock.mono_ns()
        t2 = clock.mono_ns()
        assert t2 >= t1


def test_sleep_advances_mono_ms():
    t1 = clock.mono_ms()
    clock.sleep(100)
    t2 = clock.mono_ms()
    assert t2 > t1


def test_sleep_advances_mono_ns():
    t1 = clock.mono_ns()
    clock.sleep(100)
    t2 = clock.mono_ns()
    assert t2 > t1


def test_negative_sleep_is_rejected():
    with pytest.raises(ValueError):
        clock.sleep(-1)