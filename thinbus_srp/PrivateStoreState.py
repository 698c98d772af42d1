from json import dumps, loads
from functools import partial

from jsonschema import validate
from jsonschema.exceptions import ValidationError as SchemaValidationError

from thinbus_srp.SRPError import ValidationError

from typing import Dict, Any

dumps = partial(dumps, separators = (',', ':'), ensure_ascii = False)

_HEX_PATTERN = "^[0-9a-fA-F]+$"

class PrivateStoreState:
    """
    What a server must keep between the challenge and the proof: the identity, the verifier,
    the salt and the private value b. Everything but the identity is hex.

    Keep it server side only (cache or database), b must never reach the client.
    """

    SCHEMA = {
        "type": "object",
        "properties": {
            "I": { "type": "string", "minLength": 1 },
            "v": { "type": "string", "pattern": _HEX_PATTERN },
            "s": { "type": "string", "pattern": _HEX_PATTERN },
            "b": { "type": "string", "pattern": _HEX_PATTERN },
        },
        "required": [ "I", "v", "s", "b" ],
    }

    identity: str
    verifier: str
    salt: str
    b: str

    def __init__(self, identity: str, verifier: str, salt: str, b: str):
        self.identity = identity
        self.verifier = verifier
        self.salt = salt
        self.b = b

    def __eq__(self, o: Any) -> bool:
        if not isinstance(o, PrivateStoreState):
            return NotImplemented

        return self.to_data() == o.to_data()

    def __repr__(self) -> str:
        # b is secret
        return f"PrivateStoreState: '{self.identity}'"

    def to_data(self) -> Dict[str, str]:
        return { "I": self.identity, "v": self.verifier, "s": self.salt, "b": self.b }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "PrivateStoreState":
        try:
            validate(data, cls.SCHEMA)
        except SchemaValidationError as e:
            raise ValidationError(f"Invalid private store state: {e.message}") from e

        return cls(data["I"], data["v"], data["s"], data["b"])

    def to_json(self) -> str:
        return dumps(self.to_data())

    @classmethod
    def from_json(cls, data: str) -> "PrivateStoreState":
        return cls.from_data(loads(data))
