class SrpError(Exception):
    """Base class for errors raised while computing a password check"""


class ParameterValidationError(SrpError):
    """Challenge parameters or password are missing or malformed

    The attempt should be aborted, challenge parameters may be fetched again.
    """


class InvalidChallenge(SrpError):
    """Server public value B is outside of (0, N), treated as a protocol anomaly"""


class EncodingOverflow(SrpError):
    """Value does not fit into the fixed byte width of the group modulus"""


class InvalidOperand(SrpError):
    """Group arithmetic received an operand that is not a canonical residue"""


class RngExhaustionError(SrpError):
    """Entropy source is unable to supply random bytes, safe to retry later"""
