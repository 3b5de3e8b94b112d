"""Challenge parameters issued by the remote authority for a single password check"""

import binascii
import re
from base64 import b64decode, b64encode
from typing import Union

from starsrp.exception import ParameterValidationError

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1
REQUIRED_FIELDS = ('srp_id', 'srp_B', 'current_salt')
HEX_REGEX = re.compile(r'[0-9a-fA-F]+')

SrpId = Union[int, str]


class ChallengeParameters:
    """Parsed response of the password parameters request

    srp_id - opaque 64-bit identifier, returned back untouched in the password check
    B - server public value
    salt - current password salt
    """
    def __init__(self, srp_id: SrpId, B: int, salt: bytes) -> None:
        self.srp_id = srp_id
        self.B = B
        self.salt = salt

    def __repr__(self) -> str:
        return f'ChallengeParameters(srp_id={self.srp_id!r}, B=<{self.B.bit_length()} bits>, salt=<{len(self.salt)} bytes>)'

    @classmethod
    def from_dict(cls, _dict: dict) -> 'ChallengeParameters':
        if not isinstance(_dict, dict):
            raise ParameterValidationError(f'Challenge parameters should be dict, received {type(_dict).__name__}')

        for field in REQUIRED_FIELDS:
            value = _dict.get(field)
            if value is None or value == '':
                raise ParameterValidationError(f'Missing required field {field} in challenge parameters')

        srp_id = _dict['srp_id']
        check_srp_id(srp_id)
        if srp_id == 0:
            raise ParameterValidationError('srp_id should be non-zero')

        return cls(srp_id, _parse_hex(_dict['srp_B']), _parse_base64(_dict['current_salt']))

    def to_dict(self) -> dict:
        return {
            'srp_id': self.srp_id,
            'srp_B': format(self.B, 'x'),
            'current_salt': b64encode(self.salt).decode(),
        }


def check_srp_id(srp_id: SrpId) -> None:
    """Raises ParameterValidationError unless srp_id is an int64 or its decimal string form"""
    if isinstance(srp_id, bool) or not isinstance(srp_id, (int, str)):
        raise ParameterValidationError(f'srp_id should be integer or string, received {type(srp_id).__name__}')

    value = srp_id
    if isinstance(srp_id, str):
        try:
            value = int(srp_id, 10)
        except ValueError:
            raise ParameterValidationError(f'srp_id is not a decimal number: {srp_id!r}') from None

    if not INT64_MIN <= value <= INT64_MAX:
        raise ParameterValidationError(f'srp_id does not fit into 64-bit integer: {srp_id!r}')


def _parse_hex(data: str) -> int:
    if not isinstance(data, str):
        raise ParameterValidationError(f'srp_B should be hex string, received {type(data).__name__}')

    if not HEX_REGEX.fullmatch(data):
        raise ParameterValidationError('srp_B is not a valid hex string')

    return int(data, 16)


def _parse_base64(data: str) -> bytes:
    if not isinstance(data, (str, bytes)):
        raise ParameterValidationError(f'current_salt should be base64 string, received {type(data).__name__}')

    try:
        return b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        raise ParameterValidationError('current_salt is not a valid base64 string') from None
