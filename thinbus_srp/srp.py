# SRP-6a math, thinbus flavour: every hash is taken over concatenated hex strings

from datetime import datetime

from thinbus_srp.GroupParameters import GroupParameters
from thinbus_srp.HashFunction import HashFunction, SHA256_HASH
from thinbus_srp.SRPError import ProtocolError
from thinbus_srp.ephemeral import SecureRandomSource
from thinbus_srp.utils import to_hex, canonicalize, check

from typing import Optional

SALT_HEX_LEN = 32

def generate_x(params: GroupParameters, salt: str, identity: str, password: str,
               hash: HashFunction = SHA256_HASH) -> int:
    """
    Compute x = H(s | H(I | ":" | P)) mod N, by string concatenation before hashing

    :param params: Group parameters
    :param salt: Salt of the user, as hex
    :param identity: Identity of the user
    :param password: Password of the user

    :return: x
    """

    check(salt, "salt")
    check(identity, "identity")
    check(password, "password")

    hash1 = canonicalize(hash(f"{identity}:{password}"))
    hash2 = canonicalize(hash((salt + hash1).upper()))

    return int(hash2 or "0", 16) % params.N

def generate_verifier(params: GroupParameters, salt: str, identity: str, password: str,
                      hash: HashFunction = SHA256_HASH) -> str:
    """
    Compute the verifier v = g^x mod N, to be stored with the salt instead of the password

    :return: Verifier as hex
    """

    x = generate_x(params, salt, identity, password, hash)

    return to_hex(pow(params.g, x, params.N))

def generate_random_salt(hash: HashFunction = SHA256_HASH, optional_server_salt: Optional[str] = None,
                         random_source: Optional[SecureRandomSource] = None) -> str:
    """
    Generate a salt from the time, local randomness and an optional server provided random.
    Store it under a unique constraint

    :return: Salt as hex, as long as the digest
    """

    if random_source is None:
        random_source = SecureRandomSource()

    s = random_source.hex(SALT_HEX_LEN)

    return hash(f"{datetime.now()}:{optional_server_salt}:{s}")

def compute_u(A_hex: str, B_hex: str, hash: HashFunction) -> int:
    """
    Compute the scrambling parameter u = H(A | B)
    """

    check(A_hex, "A")
    check(B_hex, "B")

    u = int(hash(A_hex + B_hex), 16)
    if u == 0:
        raise ProtocolError("bad shared public value 'u' as u == 0")

    return u

def compute_client_secret(params: GroupParameters, x: int, u: int, a: int, B: int) -> int:
    """
    S = (B - k * g^x) ^ (a + u * x) mod N
    """

    N = params.N
    exp = u * x + a
    base = (B - params.k * pow(params.g, x, N)) % N

    return pow(base, exp, N)

def compute_server_secret(params: GroupParameters, v: int, u: int, b: int, A: int) -> int:
    """
    S = (v^u * A) ^ b mod N
    """

    N = params.N

    return pow(pow(v, u, N) * A % N, b, N)

def compute_server_public(params: GroupParameters, b: int, v: int) -> int:
    """
    B = (g^b + k * v) mod N
    """

    return (pow(params.g, b, params.N) + v * params.k) % params.N

def compute_M1(A_hex: str, B_hex: str, S: int, hash: HashFunction) -> str:
    return canonicalize(hash(A_hex + B_hex + to_hex(S)))

def compute_M2(A: int, M1: str, S: int, hash: HashFunction) -> str:
    return canonicalize(hash(to_hex(A) + M1 + to_hex(S)))
