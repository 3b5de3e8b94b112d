from starsrp.group import PrimeGroup

TOY_GROUP = PrimeGroup(23, 5)


def fixed_rng(data: bytes):
    """Entropy source returning the same bytes on every call, for reproducible proofs"""
    def rng(size: int) -> bytes:
        return data[:size]
    return rng
