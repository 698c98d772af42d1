from sys import path
from os.path import join, abspath, dirname

path.insert(0, abspath(join(dirname(__file__), '..')))

from thinbus_srp import SecureRandomSource, HashFunction, GroupParameters, generate_private_value

from typing import List

import pytest

sha256 = HashFunction("SHA256")
N = GroupParameters.rfc5054_2048().N

class ConstantRandomSource(SecureRandomSource):
    """
    A totally broken CSPRNG
    """

    def __init__(self, values: List[str]):
        self.values = values
        self.lengths = []

    def hex(self, length: int) -> str:
        self.lengths.append(length)

        return self.values[min(len(self.lengths), len(self.values)) - 1]

class ZeroHash(HashFunction):
    def __call__(self, text: str) -> str:
        return "0" * 64

@pytest.mark.parametrize("length", [1, 2, 31, 64, 512])
def test_random_hex_length(length: int):
    value = SecureRandomSource().hex(length)

    assert len(value) == length
    assert value == value.lower()
    int(value, 16)

def test_private_value_in_range():
    for _ in range(20):
        assert 0 < generate_private_value(N, "tom@arcot.com", "ab", sha256) < N

def test_uses_as_many_digits_as_N():
    source = ConstantRandomSource(["ff"])
    generate_private_value(N, "tom@arcot.com", "ab", sha256, source)

    assert source.lengths == [512]

def test_uses_at_least_256_bits():
    source = ConstantRandomSource(["ff"])
    generate_private_value(23, "tom@arcot.com", "ab", sha256, source)

    assert source.lengths == [64]

def test_broken_random_source_is_mixed():
    source = ConstantRandomSource(["ab" * 256])

    # same bits, different users
    a = generate_private_value(N, "alice", "ab", sha256, source, lambda: 1000)
    b = generate_private_value(N, "bob", "ab", sha256, source, lambda: 1000)
    # same bits and user, different time
    c = generate_private_value(N, "alice", "ab", sha256, source, lambda: 1001)

    assert len({ a, b, c }) == 3

def test_mixing_is_exact():
    source = ConstantRandomSource(["ab" * 256])
    one_time_value = int(sha256("alice:cd:1234"), 16)

    r = generate_private_value(N, "alice", "cd", sha256, source, lambda: 1234)

    assert r == (int("ab" * 256, 16) + one_time_value) % N

def test_zero_is_drawn_again():
    # 0x17 = 23 = N, 0 after reduction
    source = ConstantRandomSource(["17", "05"])

    r = generate_private_value(23, "alice", "cd", ZeroHash(), source)

    assert r == 5
    assert len(source.lengths) == 2
