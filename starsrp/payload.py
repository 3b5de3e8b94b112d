from starsrp.challenge import SrpId

PASSWORD_CHECK_TYPE = 'inputCheckPasswordSRP'


class PasswordCheckPayload:
    """Password check passed as `password` field of a privileged request"""
    def __init__(self, srp_id: SrpId, A: str, M1: str) -> None:
        self.srp_id = srp_id
        self.A = A
        self.M1 = M1

    def __repr__(self) -> str:
        return f'PasswordCheckPayload(srp_id={self.srp_id!r}, A={self.A}, M1={self.M1})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, PasswordCheckPayload):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        return {
            '_': PASSWORD_CHECK_TYPE,
            'srp_id': self.srp_id,
            'A': self.A,
            'M1': self.M1,
        }

    def __json__(self) -> dict:
        return self.to_dict()


def build_password_check(srp_id: SrpId, A: int, M1: bytes) -> PasswordCheckPayload:
    """A is rendered as lowercase hex without zero padding, M1 as 64 lowercase hex chars"""
    return PasswordCheckPayload(srp_id, format(A, 'x'), M1.hex())
