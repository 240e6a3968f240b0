from __future__ import annotations

from .exceptions import RejectedCommand


def as_int(value: object) -> int:
    """Coerce an untrusted socket payload value to an int.

    Accepts ints, integral floats and numeric strings. Anything else raises
    `RejectedCommand`.
    """

    if isinstance(value, bool):
        msg = f"expected an integer, got {value!r}"
        raise RejectedCommand(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    msg = f"expected an integer, got {value!r}"
    raise RejectedCommand(msg)


def as_non_negative_int(value: object) -> int:
    number = as_int(value)
    if number < 0:
        msg = f"expected a non-negative integer, got {number}"
        raise RejectedCommand(msg)
    return number
