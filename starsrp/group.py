"""Prime group used for SRP password checks"""

from starsrp.exception import InvalidOperand
from starsrp.util import to_bytes

# RFC 5054 2048-bit safe prime
N_2048 = int(
    'AC6BDB41324A9A9BF166DE5E1389582FAF72B6651987EE07FC3192943DB56050'
    'A37329CBB4A099ED8193E0757767A13DD52312AB4B03310DCD7F48A9DA04FD50'
    'E8083969EDB767B0CF6095179A163AB3661A05FBD5FAAAE82918A9962F0B93B8'
    '55F97993EC975EEAA80D740ADBF4FF747359D041D5C33EA71D281E446B14773B'
    'CA97B43A23FB801676BD207A436C6481F1D2B9078717461A5B9D32E688F87748'
    '544523B524B0D57D5EA77A2775D2ECFA032CFBDBF52FB3786160279004E57AE6'
    'AF874E7303CE53299CCC041C7BC308D82A5698F3A8D0C38271AE35F8E9DBFBB6'
    '94B5C803D89F7AE435DE236D525F54759B65E372FCD68EF20FA7111F9E4AFF73', 16)

G = 2


class PrimeGroup:
    """Multiplicative group modulo N with generator g

    N - prime modulus
    g - generator
    width - byte length of N, every value hashed in the protocol is padded to it
    """
    def __init__(self, modulus: int, generator: int) -> None:
        if modulus < 3:
            raise ValueError(f'Group modulus should be at least 3, received {modulus}')
        if not 1 < generator < modulus:
            raise ValueError(f'Group generator should be in [2, N-1], received {generator}')

        self._modulus = modulus
        self._generator = generator
        self._width = (modulus.bit_length() + 7) // 8

    def __repr__(self) -> str:
        return f'PrimeGroup(bits={self._modulus.bit_length()}, g={self._generator})'

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def generator(self) -> int:
        return self._generator

    @property
    def width(self) -> int:
        """Byte length of the modulus (256 for 2048-bit group)"""
        return self._width

    def contains(self, value: int) -> bool:
        """Returns True in case value is a canonical residue in [0, N-1]"""
        return 0 <= value < self._modulus

    def pad(self, value: int) -> bytes:
        return to_bytes(value, self._width)

    def power(self, base: int, exponent: int) -> int:
        """base^exponent mod N

        Exponent is used as is, it is not reduced before exponentiation.
        """
        self._check_operand(base)
        if exponent < 0:
            raise InvalidOperand('Exponent should be non-negative')
        return pow(base, exponent, self._modulus)

    def add_mod(self, a: int, b: int) -> int:
        self._check_operand(a)
        self._check_operand(b)
        return (a + b) % self._modulus

    def subtract_mod(self, a: int, b: int) -> int:
        """(a - b) mod N, normalized to [0, N-1] when a < b"""
        self._check_operand(a)
        self._check_operand(b)
        result = a - b
        if result < 0:
            result += self._modulus
        return result % self._modulus

    def multiply_mod(self, a: int, b: int) -> int:
        self._check_operand(a)
        self._check_operand(b)
        return (a * b) % self._modulus

    def _check_operand(self, value: int) -> None:
        if not self.contains(value):
            raise InvalidOperand('Operand should be a canonical residue in [0, N-1]')


DEFAULT_GROUP = PrimeGroup(N_2048, G)
