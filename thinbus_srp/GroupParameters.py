from thinbus_srp.HashFunction import HashFunction

from typing import NamedTuple

# RFC 5054 2048-bit group
RFC5054_2048_N = "21766174458617435773191008891802753781907668374255538511144643224689886235383840957210909013086056401571399717235807266581649606472148410291413364152197364477180887395655483738115072677402235101762521901569820740293149529620419333266262073471054548368736039519702486226506248861060256971802984953561121442680157668000761429988222457090413873973970171927093992114751765168063614761119615476233422096442783117971236371647333871414335895773474667308967050807005509320424799678417036867928316761272274230314067548291133582479583061439577559347101961771406173684378522703483495337037655006751328447510550299250924469288819"
RFC5054_2048_g = "2"
# k = H(N | PAD(g)) with SHA-256, as shipped by thinbus
RFC5054_2048_k = "5b9e8ef059c6b32ea59fc1d322d37f04aa30bae5aa9003b8321e21ddb04e300"

def _itob(i: int) -> bytes:
    length = (i.bit_length() + 7) // 8

    return i.to_bytes(length, 'big', signed = False)

def compute_k(N: int, g: int, hash: HashFunction) -> int:
    """
    Compute the multiplier k = H(N | PAD(g)) of RFC 5054

    :param N: Safe prime
    :param g: Generator
    :param hash: Digest to use

    :return: Multiplier k
    """

    N_bytes = _itob(N)
    g_bytes = _itob(g).rjust(len(N_bytes), b'\x00')

    return int.from_bytes(hash.digest(N_bytes + g_bytes), 'big', signed = False)

class GroupParameters(NamedTuple):
    """
    Safe prime N, generator g and multiplier k. Immutable, shared by every session of an application.

    N is NOT checked to be a safe prime, this is the responsibility of the caller.
    """

    N: int
    g: int
    k: int

    @classmethod
    def from_strings(cls, N_base10: str, g_base10: str, k_base16: str) -> "GroupParameters":
        assert type(N_base10) is str, f"Expected type 'str' for N_base10, but got type '{type(N_base10)}'"
        assert type(g_base10) is str, f"Expected type 'str' for g_base10, but got type '{type(g_base10)}'"
        assert type(k_base16) is str, f"Expected type 'str' for k_base16, but got type '{type(k_base16)}'"

        N = int(N_base10, 10)
        g = int(g_base10, 10)
        k = int(k_base16, 16)

        assert 1 < g < N, f"Generator must be in [2, N), but got {g}"
        assert k != 0, "Multiplier k must not be zero"

        return cls(N, g, k)

    @classmethod
    def rfc5054_2048(cls) -> "GroupParameters":
        return cls.from_strings(RFC5054_2048_N, RFC5054_2048_g, RFC5054_2048_k)

    @property
    def hex_length(self) -> int:
        """
        Number of hex digits of N
        """

        return len(format(self.N, "x"))
