"""Helper signatures: int_to_bytes, params_fingerprint."""

from cryptography.hazmat.primitives import hashes


def int_to_bytes(n: int) -> bytes:
    """Big-endian bytes of a non-negative int, at least one byte."""
    return n.to_bytes((n.bit_length() + 7) // 8 or 1, "big")


def params_fingerprint(g: int, p: int) -> str:
    """
    SHA-256 hex over len(g)||g||len(p)||p.
    Length prefixes keep (g, p) pairs from colliding on concatenation.
    """
    digest = hashes.Hash(hashes.SHA256())
    for n in (g, p):
        b = int_to_bytes(n)
        digest.update(len(b).to_bytes(4, "big"))
        digest.update(b)
    return digest.finalize().hex()
