from logging import getLogger
from typing import Callable

from starsrp.challenge import ChallengeParameters, check_srp_id
from starsrp.exception import (
    InvalidChallenge,
    ParameterValidationError,
    RngExhaustionError,
)
from starsrp.group import DEFAULT_GROUP, PrimeGroup
from starsrp.util import H, to_int

logger = getLogger('starsrp')

Rng = Callable[[int], bytes]


def derive_session_secret(salt: bytes, password: bytes) -> int:
    """x = H(salt | password) as big-endian integer"""
    return to_int(H(salt, password))


class Proof:
    """Public result of a single proof generation

    A - client public value
    M1 - client proof digest
    """
    def __init__(self, A: int, M1: bytes) -> None:
        self.A = A
        self.M1 = M1

    def __repr__(self) -> str:
        return f'Proof(A=<{self.A.bit_length()} bits>, M1={self.M1.hex()})'


class ProofGenerator:
    """SRP prover (client part)

    A - client public value
    B - server public value
    a - client private value, drawn fresh for every proof
    M1 - client proof
    S - shared secret
    u - scrambling parameter
    x - session secret derived from salt and password

    Password, a, x and S never leave generate() and are never logged.
    """
    def __init__(self, group: PrimeGroup = DEFAULT_GROUP) -> None:
        self.group = group

    def validate(self, params: ChallengeParameters) -> None:
        if not isinstance(params, ChallengeParameters):
            raise ParameterValidationError(f'Expected ChallengeParameters, received {type(params).__name__}')
        check_srp_id(params.srp_id)
        if isinstance(params.B, bool) or not isinstance(params.B, int):
            raise ParameterValidationError('Server public value B should be integer')
        if not isinstance(params.salt, bytes) or not params.salt:
            raise ParameterValidationError('Salt should be non-empty bytes')

        if not 0 < params.B < self.group.modulus:
            logger.error(f'srp_id {params.srp_id}: server public value B is outside of (0, N)')
            raise InvalidChallenge('Server public value B should be in (0, N)')

    def generate_private_ephemeral(self, rng: Rng) -> int:
        """Draws a from as many random bytes as the modulus has, no modular reduction"""
        try:
            data = rng(self.group.width)
        except (OSError, NotImplementedError) as e:
            raise RngExhaustionError('Entropy source is unavailable') from e

        if not isinstance(data, bytes) or len(data) < self.group.width:
            raise RngExhaustionError(f'Entropy source returned less than {self.group.width} bytes')

        return to_int(data)

    def compute_public_ephemeral(self, a: int) -> int:
        return self.group.power(self.group.generator, a)

    def compute_scrambling_parameter(self, A: int, B: int) -> int:
        return to_int(H(self.group.pad(A), self.group.pad(B)))

    def compute_shared_secret(self, B: int, a: int, u: int, x: int) -> int:
        """S = (B - g^x)^(a + u * x) mod N"""
        base = self.group.subtract_mod(B, self.group.power(self.group.generator, x))
        return self.group.power(base, a + u * x)

    def compute_proof_digest(self, A: int, B: int, S: int) -> bytes:
        return H(self.group.pad(A), self.group.pad(B), self.group.pad(S))

    def generate(self, params: ChallengeParameters, password: bytes, rng: Rng) -> Proof:
        self.validate(params)
        if not isinstance(password, bytes):
            raise ParameterValidationError('Password should be bytes')

        a = self.generate_private_ephemeral(rng)
        A = self.compute_public_ephemeral(a)
        u = self.compute_scrambling_parameter(A, params.B)
        x = derive_session_secret(params.salt, password)
        S = self.compute_shared_secret(params.B, a, u, x)
        M1 = self.compute_proof_digest(A, params.B, S)

        logger.debug('srp_id %s: proof generated, A is %d bits', params.srp_id, A.bit_length())
        return Proof(A, M1)
