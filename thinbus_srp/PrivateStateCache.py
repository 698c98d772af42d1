from logging import Logger
from threading import Lock
from time import monotonic
from uuid import uuid4

from thinbus_srp.PrivateStoreState import PrivateStoreState

from typing import Callable, Dict, Optional, Tuple

class PrivateStateCache:
    """
    In-memory store of the server private states between the challenge and the proof.

    Each entry lives at most ttl seconds and can be taken only once, a second attempt
    with the same session id finds nothing. Safe to share between threads.
    """

    _entries: Dict[str, Tuple[float, str]]
    _lock: Lock
    _clock: Callable[[], float]
    _logger: Logger

    ttl: float

    def __init__(self, ttl: float = 1800, clock: Callable[[], float] = monotonic, logger: Optional[Logger] = None):
        assert isinstance(ttl, (int, float)) and 0 < ttl, f"Expected a positive number for ttl, but got '{ttl}'"

        self.ttl = ttl

        self._entries = {}
        self._lock = Lock()
        self._clock = clock
        self._logger = Logger("PrivateStateCache") if logger is None else logger

    def __len__(self) -> int:
        with self._lock:
            self._evict()

            return len(self._entries)

    def _evict(self) -> None:
        now = self._clock()

        expired = [session_id for session_id, (deadline, _) in self._entries.items() if deadline <= now]
        for session_id in expired:
            del self._entries[session_id]

        if expired:
            self._logger.debug(f"Evicted {len(expired)} expired private states")

    def put(self, state: PrivateStoreState) -> str:
        """
        Store a private state

        :param state: State returned by to_private_store_state()

        :return: Opaque session id to hand to the client
        """

        assert type(state) is PrivateStoreState, f"Expected type 'PrivateStoreState' for state, but got type '{type(state)}'"

        session_id = uuid4().hex

        with self._lock:
            self._evict()
            # serialized, so the stored state can't be mutated by the caller
            self._entries[session_id] = (self._clock() + self.ttl, state.to_json())

        return session_id

    def take(self, session_id: str) -> Optional[PrivateStoreState]:
        """
        Retrieve and forget a private state

        :param session_id: Id returned by put()

        :return: The state, or None if unknown, expired or already taken
        """

        with self._lock:
            self._evict()
            entry = self._entries.pop(session_id, None)

        if entry is None:
            return None

        return PrivateStoreState.from_json(entry[1])
