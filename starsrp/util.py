import json

from cryptography.hazmat.primitives import hashes

from starsrp.exception import EncodingOverflow


def H(*chunks: bytes) -> bytes:
    """SHA-256 over concatenated chunks

    Integers must be converted with to_bytes() using the group width before hashing,
    variable width encoding changes the digest.
    """
    h = hashes.Hash(hashes.SHA256())
    for chunk in chunks:
        h.update(chunk)
    return h.finalize()


def to_bytes(value: int, width: int) -> bytes:
    """Big-endian encoding left padded with 0x00 bytes to exactly width bytes"""
    if value < 0:
        raise EncodingOverflow('Negative value cannot be encoded as unsigned integer')
    if (value.bit_length() + 7) // 8 > width:
        raise EncodingOverflow(f'Value of {value.bit_length()} bits does not fit into {width} bytes')
    return value.to_bytes(width, byteorder='big')


def to_int(data: bytes) -> int:
    return int.from_bytes(data, byteorder='big')


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, o):  # pylint: disable=method-hidden
        if hasattr(o, '__json__'):
            return o.__json__()
        return json.JSONEncoder.default(self, o)
