from copy import deepcopy
from logging import Logger

from thinbus_srp.GroupParameters import GroupParameters, RFC5054_2048_N, RFC5054_2048_g, RFC5054_2048_k
from thinbus_srp.HashFunction import HashFunction
from thinbus_srp.factory import SRP_Factory
from thinbus_srp.PrivateStateCache import PrivateStateCache

from typing import Dict, Any, Optional

class GlobalSettings:
    _DEFAULT_SETTINGS = {
        "N": RFC5054_2048_N,
        "g": RFC5054_2048_g,
        "k": RFC5054_2048_k,
        "hash": "SHA256",
        "state_ttl": 1800,
        "timeout": 30,
    }

    _TYPE_MAPPING = {
        "N": str,
        "g": str,
        "k": str,
        "hash": str,
        "state_ttl": (int, float),
        "timeout": (int, float),
    }

    _settings: Dict[str, Any]

    def __init__(self, **kwargs):
        self._settings = {}

        for setting in self._DEFAULT_SETTINGS:
            self[setting] = kwargs.pop(setting, self._DEFAULT_SETTINGS[setting])

        assert len(kwargs) == 0, f"Invalid global setting name: {', '.join(kwargs)}"

    def __setitem__(self, o: str, v: Any) -> None:
        assert o in self._DEFAULT_SETTINGS, f"Invalid setting: {o}"
        assert isinstance(v, self._TYPE_MAPPING[o]), f"Expected type '{self._TYPE_MAPPING[o]}' for {o}, but got type '{type(v)}'"

        self._settings[o] = v

    def __getitem__(self, o: str) -> Any:
        assert o in self._settings, f"Invalid setting: {o}"

        return self._settings[o]

    def copy(self) -> "GlobalSettings":
        return GlobalSettings(**deepcopy(self._settings))

    def to_group_parameters(self) -> GroupParameters:
        return GroupParameters.from_strings(self["N"], self["g"], self["k"])

    def to_hash_function(self) -> HashFunction:
        return HashFunction(self["hash"])

    def to_factory(self, logger: Optional[Logger] = None) -> SRP_Factory:
        return SRP_Factory(self.to_group_parameters(), self.to_hash_function(), logger = logger)

    def to_private_state_cache(self, logger: Optional[Logger] = None) -> PrivateStateCache:
        return PrivateStateCache(self["state_ttl"], logger = logger)
