import hashlib

MASK32 = 0xFFFFFFFF

def normalize_address(addr: str) -> str:
    """
    Minimal normalization so hashing is prefix and case insensitive:
    - lowercase
    - drop a single leading "0x"
    """
    clean = addr.lower()
    if clean.startswith("0x"):
        clean = clean[2:]
    return clean

def to_int32(v: int) -> int:
    """Reinterpret the low 32 bits of v as a signed integer."""
    v &= MASK32
    return v - 0x100000000 if v & 0x80000000 else v

def rotl32(v: int, r: int) -> int:
    return ((v << r) | (v >> (32 - r))) & MASK32

def xor_fold32(v: int) -> int:
    """Fold high bits into low bits so a small modulus sees the whole word."""
    v ^= v >> 16
    v = (v * 0x045d9f3b) & MASK32
    v ^= v >> 16
    return v

def fnv1a_32(s: str) -> int:
    """Deterministic, fast hash over the characters of s."""
    h = 0x811c9dc5
    for c in s:
        h ^= ord(c)
        h = (h * 0x01000193) & MASK32
    return h

def murmur3_32(s: str, seed: int = 0) -> int:
    """
    MurmurHash3-style mixing, one character per round, with the standard
    fmix32 finalizer. Structurally unrelated to FNV so the two can be
    combined without their weaknesses lining up.
    """
    h = seed & MASK32
    for c in s:
        k = (ord(c) * 0xcc9e2d51) & MASK32
        k = rotl32(k, 15)
        k = (k * 0x1b873593) & MASK32

        h ^= k
        h = rotl32(h, 13)
        h = (h * 5 + 0xe6546b64) & MASK32

    h ^= len(s)
    h ^= h >> 16
    h = (h * 0x85ebca6b) & MASK32
    h ^= h >> 13
    h = (h * 0xc2b2ae35) & MASK32
    h ^= h >> 16
    return h

def weak_etag(payload_bytes: bytes) -> str:
    """Weak ETag for client-side conditional requests."""
    h = hashlib.sha256(payload_bytes).hexdigest()[:24]
    return f'W/"{h}"'
