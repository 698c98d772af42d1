from sys import path
from os.path import join, abspath, dirname

path.insert(0, abspath(join(dirname(__file__), '..')))

from thinbus_srp import construct, GroupParameters, HashFunction, PrivateStoreState, ProtocolError, Client_State, Server_State
from thinbus_srp.GroupParameters import RFC5054_2048_N, RFC5054_2048_g, RFC5054_2048_k

from json import dumps, loads
from re import fullmatch

import pytest

ClientSession, ServerSession = construct(RFC5054_2048_N, RFC5054_2048_g, RFC5054_2048_k)

identity = "tom@arcot.com"
password = "password1234"

def register():
    client = ClientSession()
    salt = client.generate_random_salt()
    verifier = client.generate_verifier(salt, identity, password)

    return salt, verifier

def test_full_login():
    salt, verifier = register()

    client = ClientSession()
    client.step1(identity, password)

    server = ServerSession()
    B = server.step1(identity, salt, verifier)

    credentials = client.step2(salt, B)
    M2 = server.step2(credentials["A"], credentials["M1"])

    assert client.step3(M2) is True

    client_key = client.get_session_key()
    server_key = server.get_session_key()

    assert client_key == server_key
    assert fullmatch("[0-9a-f]{64}", client_key)

    assert client.get_session_key(False) == server.get_session_key(False)
    assert client.state is Client_State.STEP_3
    assert server.state is Server_State.STEP_2

def test_login_through_private_store_state():
    salt, verifier = register()

    client = ClientSession()
    client.step1(identity, password)

    # this server forgets everything once the challenge is sent
    server_will_die = ServerSession()
    B = server_will_die.step1(identity, salt, verifier)
    cache_json = dumps(server_will_die.to_private_store_state().to_data())
    del server_will_die

    credentials = client.step2(salt, B)

    server = ServerSession()
    server.from_private_store_state(loads(cache_json))

    assert server.B == B
    assert server.identity == identity
    assert server.state is Server_State.STEP_1

    M2 = server.step2(credentials["A"], credentials["M1"])
    client.step3(M2)

    assert client.get_session_key() == server.get_session_key()

def test_private_store_state_keeps_values():
    salt = "00" + register()[0]
    verifier = ClientSession().generate_verifier(salt, identity, password)

    server = ServerSession()
    server.step1(identity, salt, verifier)
    state = server.to_private_store_state()

    assert state.identity == identity
    assert state.salt == salt
    assert int(state.verifier, 16) == int(verifier, 16)
    assert PrivateStoreState.from_json(state.to_json()) == state

def test_wrong_password_is_rejected():
    salt, verifier = register()

    client = ClientSession()
    client.step1(identity, "password1235")

    server = ServerSession()
    B = server.step1(identity, salt, verifier)
    credentials = client.step2(salt, B)

    with pytest.raises(ProtocolError, match = "bad client credentials"):
        server.step2(credentials["A"], credentials["M1"])

    assert server.get_session_key() is None
    assert server.state is Server_State.ABORTED

def test_password_is_dropped_after_step2():
    salt, verifier = register()

    client = ClientSession()
    client.step1(identity, password)
    assert client._P == password

    server = ServerSession()
    client.step2(salt, server.step1(identity, salt, verifier))

    assert client._P is None

def test_session_key_before_secret():
    client = ClientSession()
    server = ServerSession()

    assert client.get_session_key() is None
    assert server.get_session_key() is None

    client.step1(identity, password)
    assert client.get_session_key() is None

@pytest.mark.parametrize("hash_name", ["SHA1", "SHA256", "SHA512"])
def test_full_login_with_other_digests(hash_name: str):
    hash = HashFunction(hash_name)
    ClientSession, ServerSession = construct(RFC5054_2048_N, RFC5054_2048_g, RFC5054_2048_k, hash)

    client = ClientSession()
    salt = client.generate_random_salt()
    verifier = client.generate_verifier(salt, identity, password)

    client.step1(identity, password)
    server = ServerSession()
    credentials = client.step2(salt, server.step1(identity, salt, verifier))
    client.step3(server.step2(credentials["A"], credentials["M1"]))

    assert client.get_session_key() == server.get_session_key()
    assert len(client.get_session_key()) == hash.digest_size * 2

def test_group_parameters_are_shared():
    client = ClientSession()
    server = ServerSession()

    assert client._params is server._params
    assert client._params == GroupParameters.rfc5054_2048()

    with pytest.raises(AttributeError):
        client._params.N = 23
