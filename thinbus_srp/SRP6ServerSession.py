from logging import Logger

from thinbus_srp.GroupParameters import GroupParameters
from thinbus_srp.HashFunction import HashFunction, SHA256_HASH
from thinbus_srp.PrivateStoreState import PrivateStoreState
from thinbus_srp.SRPError import StateError, ProtocolError
from thinbus_srp.ephemeral import SecureRandomSource, generate_private_value
from thinbus_srp.srp import compute_u, compute_server_public, compute_server_secret, compute_M1, compute_M2
from thinbus_srp.types import Server_State
from thinbus_srp.utils import to_hex, from_hex, check, shorten

from typing import Dict, Any, Optional, Union

class SRP6ServerSession:
    """
    Verifier side of SRP-6a. One instance per authentication attempt:

        step1(I, s, v) = B -> step2(A, M1) = M2

    A stateless server saves to_private_store_state() after step1 and restores it in a
    new instance with from_private_store_state() when the proof comes back.
    """

    _params: GroupParameters
    _hash: HashFunction
    _random_source: SecureRandomSource
    _logger: Logger

    _state: Server_State

    _I: Optional[str]
    _v: Optional[int]
    _salt: Optional[str]
    _b: Optional[int]
    _B: Optional[int]
    _S: Optional[int]
    _K: Optional[str]

    def __init__(self, params: GroupParameters, hash: Optional[HashFunction] = None,
                       random_source: Optional[SecureRandomSource] = None, logger: Optional[Logger] = None):
        assert type(params) is GroupParameters, f"Expected type 'GroupParameters' for params, but got type '{type(params)}'"

        self._params = params
        self._hash = SHA256_HASH if hash is None else hash
        self._random_source = SecureRandomSource() if random_source is None else random_source
        self._logger = Logger("SRP6ServerSession") if logger is None else logger

        self._state = Server_State.INIT

        self._I = None
        self._v = None
        self._salt = None
        self._b = None
        self._B = None
        self._S = None
        self._K = None

    def _require_state(self, state: Server_State) -> None:
        if self._state is not state:
            raise StateError(f"IllegalStateException not in state {state.name} (state is {self._state.name})")

    def _abort(self, message: str) -> ProtocolError:
        self._state = Server_State.ABORTED
        self._logger.warning(f"Server session of '{self._I}' aborted: {message}")

        return ProtocolError(message)

    @property
    def state(self) -> Server_State:
        return self._state

    @property
    def identity(self) -> Optional[str]:
        return self._I

    @property
    def B(self) -> Optional[str]:
        """
        Public value B as hex, once generated
        """

        return None if self._B is None else to_hex(self._B)

    def step1(self, identity: str, salt: str, verifier: str) -> str:
        """
        Generate the challenge for a user

        :param identity: Identity of the user (informational)
        :param salt: Salt of the user, as hex, from the verifier store
        :param verifier: Verifier of the user, as hex, from the verifier store

        :return: Public value B as hex, to send to the client with the salt
        """

        self._require_state(Server_State.INIT)

        check(identity, "identity")
        check(salt, "salt")
        check(verifier, "verifier")

        v = from_hex(verifier, "verifier")

        self._I = identity
        self._v = v
        self._salt = salt

        self._b = generate_private_value(self._params.N, identity, salt, self._hash, self._random_source)
        self._B = compute_server_public(self._params, self._b, self._v)

        self._state = Server_State.STEP_1
        self._logger.debug(f"Server session of '{identity}' at STEP_1, B = {shorten(self.B)}")

        return self.B

    def to_private_store_state(self) -> PrivateStoreState:
        """
        Snapshot of what step2 needs. Contains the private value b, never send it to the client
        """

        self._require_state(Server_State.STEP_1)

        return PrivateStoreState(self._I, to_hex(self._v), self._salt, to_hex(self._b))

    def from_private_store_state(self, state: Union[PrivateStoreState, Dict[str, Any]]) -> None:
        """
        Restore a snapshot of to_private_store_state() in a fresh session. B is recomputed from b,
        so the session matches the challenge already sent to the client

        :param state: Snapshot, or its dict form
        """

        self._require_state(Server_State.INIT)

        if type(state) is dict:
            state = PrivateStoreState.from_data(state)

        assert type(state) is PrivateStoreState, f"Expected type 'PrivateStoreState' for state, but got type '{type(state)}'"

        check(state.identity, "identity")
        check(state.verifier, "verifier")
        check(state.salt, "salt")
        check(state.b, "b")

        self._I = state.identity
        self._v = from_hex(state.verifier, "verifier")
        self._salt = state.salt
        self._b = from_hex(state.b, "b")
        self._B = compute_server_public(self._params, self._b, self._v)

        self._state = Server_State.STEP_1
        self._logger.debug(f"Server session of '{self._I}' restored at STEP_1")

    def step2(self, A: str, M1: str) -> str:
        """
        Verify the proof of the client

        :param A: Public value of the client, as hex
        :param M1: Proof of the client

        :return: Proof of the server M2, to send to the client
        """

        self._require_state(Server_State.STEP_1)

        check(A, "A")
        check(M1, "M1")

        A_int = from_hex(A, "A")
        if A_int % self._params.N == 0:
            raise self._abort("bad client public value 'A' as A == 0 (mod N)")

        B_hex = self.B

        try:
            u = compute_u(A, B_hex, self._hash)
        except ProtocolError as e:
            raise self._abort(e.message) from e

        S = compute_server_secret(self._params, self._v, u, self._b, A_int)

        expected_M1 = compute_M1(A, B_hex, S, self._hash)
        if expected_M1 != str(M1):
            raise self._abort("bad client credentials")

        self._S = S
        M2 = compute_M2(A_int, expected_M1, S, self._hash)

        self._state = Server_State.STEP_2
        self._logger.debug(f"Server session of '{self._I}' at STEP_2")

        return M2

    def get_session_key(self, hash: bool = True) -> Optional[str]:
        """
        Get the shared session key

        :param hash: Return K = H(S) if True, else the raw S

        :return: Session key as hex, None if S is not computed yet
        """

        if self._S is None:
            return None

        S_hex = to_hex(self._S)
        if not hash:
            return S_hex

        if self._K is None:
            self._K = self._hash(S_hex)

        return self._K
