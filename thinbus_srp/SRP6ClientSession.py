from logging import Logger

from thinbus_srp.GroupParameters import GroupParameters
from thinbus_srp.HashFunction import HashFunction, SHA256_HASH
from thinbus_srp.SRPError import StateError, ProtocolError
from thinbus_srp.ephemeral import SecureRandomSource, generate_private_value
from thinbus_srp.srp import generate_x, generate_verifier, generate_random_salt, compute_u, compute_client_secret, compute_M1, compute_M2
from thinbus_srp.types import Client_State
from thinbus_srp.utils import to_hex, from_hex, check, shorten

from typing import Dict, Optional

class SRP6ClientSession:
    """
    Prover side of SRP-6a. One instance per authentication attempt:

        step1(I, P) -> step2(s, B) = {A, M1} -> step3(M2)

    Steps only go forward. A protocol error aborts the session, start a new one.
    """

    _params: GroupParameters
    _hash: HashFunction
    _random_source: SecureRandomSource
    _logger: Logger

    _state: Client_State

    _I: Optional[str]
    _P: Optional[str]       # password, dropped as soon as x is computed
    _salt: Optional[str]
    _A: Optional[int]
    _a: Optional[int]
    _B_hex: Optional[str]
    _M1: Optional[str]
    _S: Optional[int]
    _K: Optional[str]

    def __init__(self, params: GroupParameters, hash: Optional[HashFunction] = None,
                       random_source: Optional[SecureRandomSource] = None, logger: Optional[Logger] = None):
        assert type(params) is GroupParameters, f"Expected type 'GroupParameters' for params, but got type '{type(params)}'"

        self._params = params
        self._hash = SHA256_HASH if hash is None else hash
        self._random_source = SecureRandomSource() if random_source is None else random_source
        self._logger = Logger("SRP6ClientSession") if logger is None else logger

        self._state = Client_State.INIT

        self._I = None
        self._P = None
        self._salt = None
        self._A = None
        self._a = None
        self._B_hex = None
        self._M1 = None
        self._S = None
        self._K = None

    def _require_state(self, state: Client_State) -> None:
        if self._state is not state:
            raise StateError(f"IllegalStateException not in state {state.name} (state is {self._state.name})")

    def _abort(self, message: str) -> ProtocolError:
        self._state = Client_State.ABORTED
        self._P = None
        self._logger.warning(f"Client session of '{self._I}' aborted: {message}")

        return ProtocolError(message)

    @property
    def state(self) -> Client_State:
        return self._state

    @property
    def identity(self) -> Optional[str]:
        return self._I

    # registration helpers, they don't touch the state of the session
    def generate_random_salt(self, optional_server_salt: Optional[str] = None) -> str:
        return generate_random_salt(self._hash, optional_server_salt, self._random_source)

    def generate_verifier(self, salt: str, identity: str, password: str) -> str:
        return generate_verifier(self._params, salt, identity, password, self._hash)

    def step1(self, identity: str, password: str) -> None:
        """
        Record the identity and password of the user

        :param identity: Identity of the user
        :param password: Password of the user
        """

        self._require_state(Client_State.INIT)

        check(identity, "identity")
        check(password, "password")

        self._I = identity
        self._P = password

        self._state = Client_State.STEP_1
        self._logger.debug(f"Client session of '{identity}' at STEP_1")

    def step2(self, salt: str, B: str) -> Dict[str, str]:
        """
        Answer the challenge of the server

        :param salt: Salt of the user, as hex
        :param B: Public value of the server, as hex

        :return: Credentials to send to the server, { "A": A, "M1": M1 }
        """

        self._require_state(Client_State.STEP_1)

        check(salt, "salt")
        check(B, "B")

        N = self._params.N

        B_int = from_hex(B, "B")
        if B_int % N == 0:
            raise self._abort("bad server public value 'B' as B == 0 (mod N)")

        x = generate_x(self._params, salt, self._I, self._P, self._hash)
        self._P = None

        self._salt = salt
        self._B_hex = B

        self._a = generate_private_value(N, self._I, salt, self._hash, self._random_source)
        self._A = pow(self._params.g, self._a, N)
        A_hex = to_hex(self._A)

        try:
            u = compute_u(A_hex, B, self._hash)
        except ProtocolError as e:
            raise self._abort(e.message) from e

        self._S = compute_client_secret(self._params, x, u, self._a, B_int)
        self._M1 = compute_M1(A_hex, B, self._S, self._hash)

        self._state = Client_State.STEP_2
        self._logger.debug(f"Client session of '{self._I}' at STEP_2, A = {shorten(A_hex)}")

        return { "A": A_hex, "M1": self._M1 }

    def step3(self, M2: str) -> bool:
        """
        Check the proof of the server, which shows it knows the verifier matching the password

        :param M2: Proof of the server

        :return: True
        """

        self._require_state(Client_State.STEP_2)

        check(M2, "M2")

        expected_M2 = compute_M2(self._A, self._M1, self._S, self._hash)
        if expected_M2 != str(M2):
            raise self._abort("bad server credentials")

        self._state = Client_State.STEP_3
        self._logger.debug(f"Client session of '{self._I}' at STEP_3")

        return True

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
