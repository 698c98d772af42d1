# Ephemeral private values a (client) and b (server)

import secrets

from thinbus_srp.HashFunction import HashFunction
from thinbus_srp.utils import get_time

from typing import Callable, Optional

# never use less than 256 random bits, whatever the size of N
MIN_HEX_LENGTH = 64

class SecureRandomSource:
    """
    Cryptographically strong random strings, backed by the OS CSPRNG
    """

    def token_bytes(self, length: int) -> bytes:
        return secrets.token_bytes(length)

    def hex(self, length: int) -> str:
        """
        :param length: Number of hex digits

        :return: Random lowercase hex string of exactly length digits
        """

        assert type(length) is int and 0 < length, f"Expected a positive int for length, but got '{length}'"

        return self.token_bytes((length + 1) // 2).hex()[:length]

def generate_private_value(N: int, identity: str, salt: str, hash: HashFunction,
                           random_source: Optional[SecureRandomSource] = None,
                           clock: Callable[[], int] = get_time) -> int:
    """
    Draw a private value in [1, N).

    The random bits (at least 256, usually as many as N has) are added to H(I:s:time) before
    reducing mod N, so a totally broken CSPRNG returning constants still gives distinct values
    per user and per millisecond.

    :param N: Safe prime
    :param identity: Identity of the user
    :param salt: Salt of the user
    :param hash: Digest used for the one-time value
    :param random_source: Source of the random bits
    :param clock: Current time in milliseconds

    :return: Private value
    """

    if random_source is None:
        random_source = SecureRandomSource()

    hex_length = max(len(format(N, "x")), MIN_HEX_LENGTH)

    r = 0
    # reaching 0 means drawing exactly a multiple of N
    while r == 0:
        random_value = int(random_source.hex(hex_length), 16)
        one_time_value = int(hash(f"{identity}:{salt}:{clock()}"), 16)

        r = (random_value + one_time_value) % N

    return r
