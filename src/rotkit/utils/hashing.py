from collections.abc import Iterable

_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK
    return value - (1 << 32) if value & 0x80000000 else value


def combine_hashes(h1: int, h2: int) -> int:
    """
    Order-sensitive combination ``((h1 << 5) + h1) ^ h2`` in signed 32 bit.

    ``combine_hashes(a, b) != combine_hashes(b, a)`` in general.
    """
    return _to_int32((((h1 << 5) + h1) & _MASK) ^ (h2 & _MASK))


def hash_components(values: Iterable[float]) -> int:
    """Fold the hashes of ``values`` left to right with :func:`combine_hashes`."""
    it = iter(values)
    try:
        result = _to_int32(hash(next(it)))
    except StopIteration:
        return 0
    for value in it:
        result = combine_hashes(result, hash(value))
    return result
