from sys import path
from os.path import join, abspath, dirname

path.insert(0, abspath(join(dirname(__file__), '..')))

from thinbus_srp import GroupParameters, HashFunction, ValidationError, generate_x, generate_verifier, generate_random_salt
from thinbus_srp.utils import canonicalize

import pytest

params = GroupParameters.rfc5054_2048()
sha256 = HashFunction("SHA256")

# registration data shared with the thinbus Javascript end-to-end server
INTEROP_IDENTITY = "testuser"
INTEROP_PASSWORD = "password1234"
INTEROP_SALT = "beaff5190c8691567dc8a3abf2fef9fccb9fcef9c5450f32cb479c355fd31194"
INTEROP_VERIFIER = "9398e888e2ac20fca8d2cd5ad5e8fe95047ca0116409cb0f98cfd39dd6410cc9159ce23dcc70c6f841bee8cb1b4059450816583f26d9751971b789c0179fb719657c36c6a64ba4131fea53687b1fcdd27c4905893097fc8d6f8b23edd28f44231d872a5d0855132e31b5d6e8eaef160865a5e4506c2e897da3aa11fbe562c053c2caa182659ad9bb6c158a2c0b1a7d5443094d95dbccb4b222db5e96c659e2b8c3c87d72ba076044e8b6aaf10eea507cbd25be7e1d80ede5c6d33ea6bed49d9f5142014c83ed01d28ad20235eaaf4570a7ed39e6bb6e2532c05221bd924f222578233c3d33d97cfdd98324acc14acfcb70a3c280b29702b4d2effca947d415e0"

def test_verifier_matches_thinbus():
    assert generate_verifier(params, INTEROP_SALT, INTEROP_IDENTITY, INTEROP_PASSWORD) == INTEROP_VERIFIER

def test_verifier_is_deterministic():
    salt = generate_random_salt()

    v1 = generate_verifier(params, salt, "tom@arcot.com", "password1234")
    v2 = generate_verifier(params, salt, "tom@arcot.com", "password1234")

    assert v1 == v2
    assert v1 == v1.lower()
    assert not v1.startswith("0x")

@pytest.mark.parametrize("salt,identity,password", [
    (INTEROP_SALT, INTEROP_IDENTITY, "password1235"),
    (INTEROP_SALT, "testuser2", INTEROP_PASSWORD),
    ("beaff5190c8691567dc8a3abf2fef9fc", INTEROP_IDENTITY, INTEROP_PASSWORD),
])
def test_verifier_depends_on_every_input(salt: str, identity: str, password: str):
    assert generate_verifier(params, salt, identity, password) != INTEROP_VERIFIER

def test_x_follows_the_hex_concatenation():
    salt = "00ab"
    hash1 = canonicalize(sha256("alice:secret"))
    expected = int(canonicalize(sha256((salt + hash1).upper())), 16) % params.N

    assert generate_x(params, salt, "alice", "secret") == expected

@pytest.mark.parametrize("salt,identity,password", [
    (None, "alice", "secret"),
    ("", "alice", "secret"),
    ("0", "alice", "secret"),
    ("ab", None, "secret"),
    ("ab", "", "secret"),
    ("ab", "alice", None),
    ("ab", "alice", ""),
])
def test_x_rejects_missing_arguments(salt: str, identity: str, password: str):
    with pytest.raises(ValidationError):
        generate_x(params, salt, identity, password)

def test_random_salt():
    s1 = generate_random_salt()
    s2 = generate_random_salt(optional_server_salt = "c0ffee")

    assert len(s1) == 64
    assert int(s1, 16) >= 0
    assert s1 != s2

    assert len(generate_random_salt(HashFunction("SHA1"))) == 40
