"""djb2 string hashing.

The seed, multiplier and 32-bit wraparound are a fixed contract: bucket
placement of every stored key depends on them.
"""

HASH_SEED = 5381
HASH_WIDTH = 0xFFFFFFFF


def djb2(data: bytes) -> int:
    hash = HASH_SEED
    for c in data:
        hash = ((hash << 5) + hash + c) & HASH_WIDTH
    return hash


def hash_string(key: str, modulus: int) -> int:
    """Bucket index of `key` in a table of `modulus` buckets."""
    if not isinstance(key, str):
        raise TypeError("keys must be str", key)
    if modulus < 1:
        raise ValueError("modulus must be positive", modulus)
    # lone surrogates are valid str contents
    return djb2(key.encode("utf-8", "surrogatepass")) % modulus
