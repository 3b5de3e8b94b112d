from logging import getLogger
from os import urandom
from typing import Union

from starsrp.challenge import ChallengeParameters
from starsrp.exception import ParameterValidationError
from starsrp.group import DEFAULT_GROUP, PrimeGroup
from starsrp.payload import PasswordCheckPayload, build_password_check
from starsrp.srp import ProofGenerator, Rng

logger = getLogger('starsrp')


def compute_proof(params: Union[ChallengeParameters, dict], password: Union[str, bytes], rng: Rng = urandom,
                  group: PrimeGroup = DEFAULT_GROUP) -> PasswordCheckPayload:
    """Computes SRP password check for a single attempt

    params - ChallengeParameters or raw response with srp_id, srp_B and current_salt
    password - plaintext password, str is encoded as UTF-8
    rng - entropy source with os.urandom signature
    """
    if isinstance(params, dict):
        params = ChallengeParameters.from_dict(params)

    if isinstance(password, str):
        password = _encode_password(password)
    elif not isinstance(password, bytes):
        raise ParameterValidationError(f'Password should be str or bytes, received {type(password).__name__}')

    logger.debug(f'Computing password check for srp_id {getattr(params, "srp_id", None)}')
    proof = ProofGenerator(group).generate(params, password, rng)
    return build_password_check(params.srp_id, proof.A, proof.M1)


def _encode_password(password: str) -> bytes:
    # UnicodeEncodeError carries the password, keep it out of __context__
    try:
        return password.encode()
    except UnicodeEncodeError:
        pass
    raise ParameterValidationError('Password is not valid UTF-8')
