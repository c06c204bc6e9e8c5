import threading
from unittest import mock

import pytest

from sckit.thread import Thread, ThreadError


def echo(arg):
    return arg


def test_join_returns_function_result():
    thread = Thread()
    thread.start(echo, "first")
    assert thread.join() == "first"
    assert thread.running is False


def test_term_after_join_is_harmless():
    thread = Thread()
    thread.start(echo, "first")
    assert thread.join() == "first"
    thread.term()
    thread.term()
    assert thread.join() is None


def test_start_then_term_runs_function():
    seen = []
    thread = Thread()
    thread.start(seen.append, "first")
    thread.term()
    assert seen == ["first"]


def test_join_without_start_gives_none():
    thread = Thread()
    assert thread.join() is None


def test_runs_on_another_thread():
    thread = Thread()
    thread.start(lambda _: threading.get_ident(), None)
    assert thread.join() != threading.get_ident()
    assert thread.running is False


def test_reuse_after_join():
    thread = Thread()
    thread.start(echo, 1)
    assert thread.join() == 1
    thread.start(echo, 2)
    assert thread.join() == 2


def test_start_twice_raises():
    gate = threading.Event()
    thread = Thread()
    thread.start(lambda _: gate.wait(5), None)
    try:
        with pytest.raises(ThreadError):
            thread.start(echo, "second")
        assert thread.error == "thread is already started"
    finally:
        gate.set()
        assert thread.join() is True


def test_exception_in_function_raised_on_join():
    def fail(_):
        raise KeyError("boom")

    thread = Thread()
    thread.start(fail, None)
    with pytest.raises(ThreadError) as info:
        thread.join()
    assert isinstance(info.value.__cause__, KeyError)
    assert "boom" in thread.error
    assert thread.join() is None


def test_start_failure_sets_error_and_can_retry():
    thread = Thread()
    with mock.patch.object(
        threading.Thread, "start", side_effect=RuntimeError("can't start new thread")
    ):
        with pytest.raises(ThreadError):
            thread.start(echo, "first")
    assert thread.error == "can't start new thread"
    assert thread.running is False
    thread.start(echo, "first")
    assert thread.join() == "first"


def test_context_manager_terms():
    seen = []
    with Thread() as thread:
        thread.start(seen.append, "x")
    assert seen == ["x"]
    assert thread.running is False