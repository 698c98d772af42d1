from thinbus_srp.SRPError import SRPError, ValidationError, StateError, ProtocolError, TransportError
from thinbus_srp.types import Client_State, Server_State
from thinbus_srp.GroupParameters import GroupParameters, compute_k
from thinbus_srp.HashFunction import HashFunction
from thinbus_srp.ephemeral import SecureRandomSource, generate_private_value
from thinbus_srp.srp import generate_x, generate_verifier, generate_random_salt
from thinbus_srp.PrivateStoreState import PrivateStoreState
from thinbus_srp.SRP6ClientSession import SRP6ClientSession
from thinbus_srp.SRP6ServerSession import SRP6ServerSession
from thinbus_srp.factory import SRP_Factory, construct
from thinbus_srp.GlobalSettings import GlobalSettings
from thinbus_srp.PrivateStateCache import PrivateStateCache
from thinbus_srp.Thinbus_API import Thinbus_API
