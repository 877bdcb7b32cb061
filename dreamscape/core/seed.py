"""Deterministic seed derivation.

The same input text always yields the same seed, so replaying a scene
reproduces the same visuals while distinct texts diverge.
"""

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
GOLDEN_GAMMA = 2654435761

_MASK32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    """Wrap an arbitrary int into the signed 32-bit range."""
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply (signed result)."""
    return _to_int32((a & _MASK32) * (b & _MASK32))


def seed_from_text(text: str) -> int:
    """FNV-1a style hash of *text*, returned as a non-negative integer."""
    h = _to_int32(FNV_OFFSET_BASIS)
    for char in text:
        h = _to_int32(h ^ ord(char))
        h = _imul(h, FNV_PRIME)
    return abs(h)


def derive_seed(base_seed: int, index: int) -> int:
    """Mix *base_seed* with *index* to decorrelate per-item variation."""
    mixed = _to_int32(base_seed) ^ _to_int32(index * GOLDEN_GAMMA)
    return abs(_imul(mixed, FNV_PRIME))
