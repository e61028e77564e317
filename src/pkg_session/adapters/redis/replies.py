"""
Decoders for Redis replies.

Each function takes the `(err, reply)` pair of a single round trip and
returns a Result. They do no I/O.

See https://redis.io/docs/reference/protocol-spec/ for the reply types.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from ...domain.constants import ReplyStatus
from ...domain.value_objects import Err, Ok, Result


def status_reply(err: Optional[Exception], reply: Any) -> Result[bool]:
    """
    Parse a simple string reply (`+OK`).

    redis-py turns the `OK` status of SET into `True`, so both shapes count
    as a positive reply.
    """
    if err is not None:
        return Err(err)

    return Ok(reply is True or reply == ReplyStatus.OK.value)


def value_reply(err: Optional[Exception], reply: Optional[str]) -> Result[Optional[str]]:
    """
    Parse a bulk string reply. `None` means the key does not exist.
    """
    if err is not None:
        return Err(err)
    return Ok(reply)


def integer_reply(
    err: Optional[Exception],
    reply: Any,
    expected: Optional[int] = None,
) -> Result[bool]:
    """
    Parse an integer reply.

    When `expected` is given, any other value is a negative result and not
    an error.
    """
    if err is not None:
        return Err(err)
    if expected is not None and reply != expected:
        return Ok(False)
    return Ok(isinstance(reply, int) and not isinstance(reply, bool))


def falsy_to_error(response: Result[bool], error: Exception) -> Result[Literal[True]]:
    """
    Collapse a boolean outcome into "succeeded or failed".

    - Err propagates unchanged
    - Ok(False) becomes Err(error)
    - Ok(True) passes through
    """
    if isinstance(response, Err):
        return response
    if response.value:
        return Ok(True)
    return Err(error)
