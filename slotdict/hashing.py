"""Deterministic 32-bit hashes.

The builtin ``hash`` of ``str`` is salted per process, so keys that must land
in a known slot across runs hash themselves with these functions instead.
"""

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000

_MULTIPLIER = 31


def to_int32(n: int) -> int:
    n &= _INT32_MASK
    if n & _INT32_SIGN:
        return n - (1 << 32)
    return n


def hash_string(key: str) -> int:
    # folds UTF-16 code units, so astral characters count as surrogate pairs
    data = key.encode("utf-16-be", "surrogatepass")
    hash = 0
    for i in range(0, len(data), 2):
        unit = (data[i] << 8) | data[i + 1]
        hash = (hash * _MULTIPLIER + unit) & _INT32_MASK
    return to_int32(hash)


def hash_fields(*hashes: int) -> int:
    hash = 1
    for h in hashes:
        hash = (hash * _MULTIPLIER + h) & _INT32_MASK
    return to_int32(hash)
