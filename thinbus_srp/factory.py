from functools import partial
from logging import Logger

from thinbus_srp.GroupParameters import GroupParameters
from thinbus_srp.HashFunction import HashFunction, SHA256_HASH
from thinbus_srp.SRP6ClientSession import SRP6ClientSession
from thinbus_srp.SRP6ServerSession import SRP6ServerSession
from thinbus_srp.ephemeral import SecureRandomSource
from thinbus_srp.srp import generate_x, generate_verifier, generate_random_salt

from typing import Callable, Optional, Tuple

class SRP_Factory:
    """
    Group parameters and digest bound once at startup, handing out fresh sessions
    """

    params: GroupParameters
    hash: HashFunction

    _random_source: Optional[SecureRandomSource]
    _logger: Optional[Logger]

    def __init__(self, params: GroupParameters, hash: Optional[HashFunction] = None,
                       random_source: Optional[SecureRandomSource] = None, logger: Optional[Logger] = None):
        assert type(params) is GroupParameters, f"Expected type 'GroupParameters' for params, but got type '{type(params)}'"
        assert hash is None or isinstance(hash, HashFunction), f"Expected None or type 'HashFunction' for hash, but got type '{type(hash)}'"

        self.params = params
        self.hash = SHA256_HASH if hash is None else hash

        self._random_source = random_source
        self._logger = logger

    def client_session(self) -> SRP6ClientSession:
        return SRP6ClientSession(self.params, self.hash, self._random_source, self._logger)

    def server_session(self) -> SRP6ServerSession:
        return SRP6ServerSession(self.params, self.hash, self._random_source, self._logger)

    def generate_x(self, salt: str, identity: str, password: str) -> int:
        return generate_x(self.params, salt, identity, password, self.hash)

    def generate_verifier(self, salt: str, identity: str, password: str) -> str:
        return generate_verifier(self.params, salt, identity, password, self.hash)

    def generate_random_salt(self, optional_server_salt: Optional[str] = None) -> str:
        return generate_random_salt(self.hash, optional_server_salt, self._random_source)

def construct(N_base10: str, g_base10: str, k_base16: str, hash: Optional[HashFunction] = None,
              logger: Optional[Logger] = None) -> Tuple[Callable[[], SRP6ClientSession], Callable[[], SRP6ServerSession]]:
    """
    Bind the group parameters to the session classes

    :param N_base10: Safe prime N, as decimal. It is NOT checked to be a safe prime
    :param g_base10: Generator g, as decimal
    :param k_base16: Multiplier k, as hex (usually H(N | PAD(g)))
    :param hash: Digest, SHA-256 if None
    :param logger: Logger given to the sessions

    :return: Constructors of client sessions and server sessions
    """

    params = GroupParameters.from_strings(N_base10, g_base10, k_base16)
    hash = SHA256_HASH if hash is None else hash

    return (partial(SRP6ClientSession, params, hash, None, logger),
            partial(SRP6ServerSession, params, hash, None, logger))
