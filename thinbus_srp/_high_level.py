from thinbus_srp.SRP6ClientSession import SRP6ClientSession

class High_Level:
    _parent: "Thinbus_API"

    def __init__(self, parent: "Thinbus_API"):
        self._parent = parent

    async def login(self, identity: str, password: str) -> str:
        """
        Log the user in, checking the server knows the verifier of the password

        :param identity: Identity of the user
        :param password: Password of the user

        :return: Shared session key K
        """

        client: SRP6ClientSession = self._parent.factory.client_session()
        client.step1(identity, password)

        challenge = await self._parent.low_level.get_challenge(identity)
        credentials = client.step2(challenge["salt"], challenge["B"])

        rsp = await self._parent.low_level.authenticate(challenge["sessionId"], credentials["A"], credentials["M1"])
        client.step3(rsp["M2"])

        self._parent._logger.info(f"Logged in as '{identity}'")

        return client.get_session_key()
