from thinbus_srp.GlobalSettings import GlobalSettings
from thinbus_srp._low_level import Low_Level
from thinbus_srp._high_level import High_Level
from thinbus_srp.factory import SRP_Factory

from aiohttp import ClientSession, ClientTimeout
from multidict import CIMultiDict

from logging import Logger
from typing import Optional

class Thinbus_API:
    """
    Client side of a thinbus compatible server, over HTTP.
    The SRP steps run locally, only {identity}, {A, M1} go out
    """

    # Variables
    _BASE_ADDRESS: str
    _logger: Logger
    _session: Optional[ClientSession]

    _timeout: ClientTimeout
    _headers: CIMultiDict

    settings: GlobalSettings
    factory: SRP_Factory

    ### Low Level Public API
    low_level: Low_Level
    ### High Level Public API
    high_level: High_Level

    # === Operators === #
    def __init__(self, base_address: str, session: Optional[ClientSession] = None, logger: Optional[Logger] = None,
                       settings: Optional[GlobalSettings] = None):
        # variable passing

        assert type(base_address) is str, f"Expected type 'str' for base_address, but got type '{type(base_address)}'"
        assert session is None or type(session) is ClientSession, f"Expected None or type 'ClientSession' for session, but got type '{type(session)}'"

        self._BASE_ADDRESS = base_address.rstrip("/")

        # no session = one session per request
        self._session = session

        if logger is None:
            self._logger = Logger("Thinbus_API")
        else:
            self._logger = logger

        self.settings = GlobalSettings() if settings is None else settings
        self.factory = self.settings.to_factory(self._logger)

        self._timeout = ClientTimeout(self.settings["timeout"])
        self._headers = CIMultiDict()

        # API parts
        self.low_level = Low_Level(self)
        self.high_level = High_Level(self)

    def attach_session(self, session: ClientSession) -> None:
        """
        Attach a ClientSession, reused by every request
        """

        assert session is not None
        assert type(session) is ClientSession, f"Expected type 'ClientSession' for session, but got type '{type(session)}'"

        self._session = session

    def detach_session(self) -> None:
        """
        Detach the current ClientSession, creating one per request
        """

        self._session = None

    @property
    def headers(self) -> CIMultiDict:
        """
        Headers of the HTTP requests
        """

        return self._headers

    @property
    def timeout(self):
        """
        Timeout for a request (in seconds)
        """

        return self._timeout.total

    @timeout.setter
    def timeout(self, value: int):
        """
        Timeout for a request (in seconds)
        """

        self._timeout = ClientTimeout(value)
