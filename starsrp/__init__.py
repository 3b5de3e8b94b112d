from starsrp.check import compute_proof

__all__ = ['compute_proof']
