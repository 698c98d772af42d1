from re import compile
from time import time

from thinbus_srp.SRPError import ValidationError

from typing import Any

def to_hex(n: int) -> str:
    """
    Lowercase hex of a big integer, no prefix and no leading zeros
    """

    return format(n, "x")

_HEX = compile("[0-9a-fA-F]+")

def from_hex(s: str, name: str = "value") -> int:
    """
    Parse a hex value received from the other party. Only plain hex digits are accepted,
    no prefix, sign, separator or whitespace
    """

    if type(s) is not str or _HEX.fullmatch(s) is None:
        raise ValidationError(f"{name} must be hex")

    return int(s, 16)

def canonicalize(digest: str) -> str:
    """
    Strip the leading '0' digits of a hex digest, so it renders like the hex of the
    equivalent big integer in the other implementations (Java BigInteger, jsbn).

    Only M1 and M2 (and the intermediate hashes of x) go through this. A, B, the salt
    and the verifier keep their hex form as is, changing that breaks the interop.
    """

    return digest.lstrip("0")

def check(value: Any, name: str) -> None:
    if value is None or value == "" or value == "0":
        raise ValidationError(f"{name} must not be null, empty or zero")

def get_time() -> int:
    """
    Get the current time

    :return: Current time with millisecond precision
    """

    return int(time() * 1000)

def shorten(s: str) -> str:
    if len(s) <= 24:
        return s

    return f"{s[:16]}...{s[-8:]}"
