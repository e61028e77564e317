# tests/test_replies.py
from pkg_session.adapters.redis.replies import (
    falsy_to_error,
    integer_reply,
    status_reply,
    value_reply,
)
from pkg_session.domain.exceptions import NegativeResultError, TransportError
from pkg_session.domain.value_objects import Err, Ok


def test_status_reply():
    boom = TransportError("boom")

    assert status_reply(None, "OK") == Ok(True)
    assert status_reply(None, True) == Ok(True)
    assert status_reply(None, None) == Ok(False)
    assert status_reply(None, "QUEUED") == Ok(False)
    assert status_reply(boom, "OK") == Err(boom)


def test_value_reply():
    boom = TransportError("boom")

    assert value_reply(None, "user42") == Ok("user42")
    assert value_reply(None, "") == Ok("")
    assert value_reply(None, None) == Ok(None)
    assert value_reply(boom, "user42") == Err(boom)


def test_integer_reply():
    boom = TransportError("boom")

    assert integer_reply(None, 0) == Ok(True)
    assert integer_reply(None, 3) == Ok(True)
    assert integer_reply(None, "3") == Ok(False)
    assert integer_reply(None, None) == Ok(False)
    assert integer_reply(boom, 1) == Err(boom)


def test_integer_reply_with_expected_count():
    assert integer_reply(None, 1, 1) == Ok(True)
    # any other count is a negative result, not an error
    assert integer_reply(None, 0, 1) == Ok(False)
    assert integer_reply(None, 2, 1) == Ok(False)
    assert integer_reply(None, "1", 1) == Ok(False)


def test_falsy_to_error():
    fallback = NegativeResultError("write did not apply")
    boom = TransportError("boom")

    assert falsy_to_error(Ok(True), fallback) == Ok(True)
    assert falsy_to_error(Ok(False), fallback) == Err(fallback)
    assert falsy_to_error(Err(boom), fallback) == Err(boom)
