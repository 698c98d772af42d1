from enum import IntEnum

class Client_State(IntEnum):
    # ready to receive the identity and password
    INIT = 0
    # identity and password recorded, waiting for the salt and B of the server
    STEP_1 = 1
    # A and M1 computed, waiting for M2 of the server
    STEP_2 = 2
    # M2 verified, authentication is complete
    STEP_3 = 3
    # a protocol error killed the session
    ABORTED = -1

class Server_State(IntEnum):
    # ready to receive the identity, salt and verifier
    INIT = 0
    # b and B generated, waiting for A and M1 of the client
    STEP_1 = 1
    # M1 verified and M2 computed, authentication is complete
    STEP_2 = 2
    # a protocol error killed the session
    ABORTED = -1
