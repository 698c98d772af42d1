# Low level interface
# Functions here have no side effect and return the exact response of the request

from aiohttp import ClientSession
from aiohttp.client_reqrep import ClientResponse
from aiohttp.client_exceptions import ClientConnectionError

from jsonschema import validate
from jsonschema.exceptions import ValidationError as SchemaValidationError

from thinbus_srp.SRPError import TransportError

from typing import Dict, Tuple, Any, Optional

#=== SCHEMAS ===#
_CHALLENGE_SCHEMA = {
    "type": "object",
    "properties": {
        "salt": { "type": "string", "minLength": 1 },
        "B": { "type": "string", "minLength": 1 },
        "sessionId": { "type": "string", "minLength": 1 },
    },
    "required": [ "salt", "B", "sessionId" ],
}

_AUTHENTICATE_SCHEMA = {
    "type": "object",
    "properties": {
        "M2": { "type": "string", "minLength": 1 },
        "success": { "type": "boolean" },
    },
    "required": [ "M2" ],
}

#=== API ===#
class Low_Level:
    _parent: "Thinbus_API"

    is_schema_validation_enabled: bool

    def __init__(self, parent: "Thinbus_API"):
        self._parent = parent
        self.is_schema_validation_enabled = True

    def _treat_response_object(self, rsp: ClientResponse, content: Any, status: int) -> Any:
        # success
        if rsp.status == status:
            return content

        if type(content) is dict and content.get("error") is not None:     # server error message
            raise TransportError(rsp.status, content["error"])

        if rsp.reason is not None:                                          # HTTPException error
            raise TransportError(rsp.status, str(rsp.reason))
        else:
            raise TransportError(rsp.status, "Unknown error")

    def _validate(self, content: Any, schema: Dict[str, Any]) -> None:
        if not self.is_schema_validation_enabled:
            return

        try:
            validate(content, schema)
        except SchemaValidationError as e:
            raise TransportError(None, f"Malformed response: {e.message}") from e

    async def _treat_response(self, rsp: ClientResponse) -> Any:
        if rsp.content_type == "application/json":
            return (await rsp.json())
        else:
            return (await rsp.text())

    async def _request(self, method: str, url: str, session: ClientSession, data: Optional[Dict[str, Any]]) -> Tuple[ClientResponse, Any]:
        kwargs = {
            "timeout": self._parent._timeout,
            "headers": self._parent.headers,
        }

        if data is not None:
            kwargs["json"] = data

        async with session.request(method, url, **kwargs) as rsp:
            return (rsp, await self._treat_response(rsp))

    async def request(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Tuple[ClientResponse, Any]:
        """
        Send request

        :param method: Method of the request (get, post, delete)
        :param endpoint: Endpoint of the request
        :param data: Data to pass to the method if needed
        """

        url = f"{self._parent._BASE_ADDRESS}{endpoint}"

        is_sync = self._parent._session is None
        session = ClientSession() if is_sync else self._parent._session

        try:
            return await self._request(method, url, session, data)
        except ClientConnectionError as e:      # server unreachable
            raise TransportError(None, str(e)) from e
        finally:
            if is_sync:
                await session.close()

    async def get_challenge(self, identity: str) -> Dict[str, str]:
        """
        Ask the server for the challenge of a user

        :param identity: Identity of the user

        :return: { "salt": salt, "B": B, "sessionId": session id }
        """

        assert type(identity) is str, f"Expected type 'str' for identity, but got type '{type(identity)}'"

        rsp, content = await self.request("post", "/api/challenge", { "username": identity })
        self._treat_response_object(rsp, content, 200)
        self._validate(content, _CHALLENGE_SCHEMA)

        return content

    async def authenticate(self, session_id: str, A: str, M1: str) -> Dict[str, Any]:
        """
        Send the credentials answering a challenge

        :param session_id: Session id given with the challenge
        :param A: Public value of the client
        :param M1: Proof of the client

        :return: { "M2": M2, "success": True }
        """

        assert type(session_id) is str, f"Expected type 'str' for session_id, but got type '{type(session_id)}'"
        assert type(A) is str, f"Expected type 'str' for A, but got type '{type(A)}'"
        assert type(M1) is str, f"Expected type 'str' for M1, but got type '{type(M1)}'"

        rsp, content = await self.request("post", "/api/authenticate", { "sessionId": session_id, "A": A, "M1": M1 })
        self._treat_response_object(rsp, content, 200)
        self._validate(content, _AUTHENTICATE_SCHEMA)

        return content
