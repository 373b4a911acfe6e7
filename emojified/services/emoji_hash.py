"""Address -> emoji fingerprint.

Each of the four output positions mixes two independent 32-bit hashes:

  * FNV-1a over the whole canonical address plus a per-position salt, so
    any edit anywhere moves every position;
  * a Murmur-style hash over a 16 character window starting 8 characters
    further along per position, seeded per position, so local edits keep
    moving positions even when the global hash happens to collide. The
    windows overlap and together cover all 40 characters.

The two are multiplied by different odd constants, XORed, and folded down
so the low bits used for the palette index depend on all 32 bits of both
hashes. Not a cryptographic hash: it only makes look-alike addresses look
different.
"""

from ..core.utils import MASK32, fnv1a_32, murmur3_32, to_int32, xor_fold32
from ..data.palette import PALETTE
from .address import canonicalize_address

SYMBOLS_PER_FINGERPRINT = 4

# Odd primes; position p salts with SALTS[p] and scales the window hash
# by the next salt, wrapping around
SALTS = (97, 101, 103, 107)
WINDOW_STRIDE = 8
WINDOW_WIDTH = 16
WINDOW_SEED_STEP = 1009

def palette_index(address: str, position: int) -> int:
    salt = SALTS[position]
    full = fnv1a_32(address + str(salt))

    start = position * WINDOW_STRIDE
    window = murmur3_32(address[start:start + WINDOW_WIDTH], position * WINDOW_SEED_STEP)

    multiplier = SALTS[(position + 1) % SYMBOLS_PER_FINGERPRINT]
    combined = to_int32(xor_fold32(((full * salt) & MASK32) ^ ((window * multiplier) & MASK32)))
    return abs(combined) % len(PALETTE)

def fingerprint_symbols(address: str) -> list[str]:
    """The fingerprint as a list of SYMBOLS_PER_FINGERPRINT palette symbols."""
    canonical = canonicalize_address(address)
    return [PALETTE[palette_index(canonical, p)] for p in range(SYMBOLS_PER_FINGERPRINT)]

def fingerprint(address: str) -> str:
    """
    Deterministic emoji fingerprint for an address.

    Accepts any string; prefix, case and missing leading zeros do not change
    the result. Check is_valid_address() first if the input is untrusted.
    """
    return "".join(fingerprint_symbols(address))
