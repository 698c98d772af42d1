from Crypto.Hash import SHA1, SHA256, SHA384, SHA512

from typing import Dict, Any

class HashFunction:
    """
    The digest H used through the whole protocol. It hashes the UTF-8 bytes of a string
    (usually concatenated hex strings without separator) and returns the lowercase hex digest.

    The host application picks one at startup and injects it, there is no detection at runtime.
    """

    _ALGORITHMS: Dict[str, Any] = {
        "SHA1": SHA1,
        "SHA256": SHA256,
        "SHA384": SHA384,
        "SHA512": SHA512,
    }

    name: str
    _module: Any

    def __init__(self, name: str = "SHA256"):
        assert type(name) is str, f"Expected type 'str' for name, but got type '{type(name)}'"

        name = name.upper().replace("-", "")
        assert name in self._ALGORITHMS, f"Unsupported hash algorithm: {name}"

        self.name = name
        self._module = self._ALGORITHMS[name]

    @property
    def digest_size(self) -> int:
        """
        Size of the digest (in bytes)
        """

        return self._module.digest_size

    def digest(self, data: bytes) -> bytes:
        return self._module.new(data).digest()

    def __call__(self, text: str) -> str:
        return self._module.new(text.encode("utf-8")).hexdigest().lower()

    def __repr__(self) -> str:
        return f"HashFunction: '{self.name}'"

SHA256_HASH = HashFunction("SHA256")
