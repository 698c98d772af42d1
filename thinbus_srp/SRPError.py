from typing import Optional

class SRPError(Exception):
    """
    Base error of the SRP-6a engine
    """

    message: str

    def __init__(self, message: str):
        super().__init__(message)

        self.message = message

class ValidationError(SRPError):
    """
    An argument is None, empty or zero
    """

class StateError(SRPError):
    """
    A step was invoked outside of its required state. This is an integration bug,
    not an authentication failure
    """

class ProtocolError(SRPError):
    """
    The protocol detected a bad public value or a proof mismatch. The session is dead
    """

class TransportError(SRPError):
    """
    The HTTP transport received an unexpected response
    """

    status: Optional[int]

    def __init__(self, status: Optional[int], message: str):
        super().__init__(message)

        self.status = status

    def __str__(self) -> str:
        return f"{self.status} - {self.message}"
