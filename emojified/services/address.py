import re

from ..core.utils import normalize_address

CANONICAL_WIDTH = 40
# "0x" + 40 hex characters; anything shorter is displayed verbatim
FULL_ADDRESS_LENGTH = CANONICAL_WIDTH + 2

_HEX_BODY = re.compile(r"[0-9a-fA-F]{40}")

def is_valid_address(address: object) -> bool:
    """
    True when address is an optionally "0x"/"0X" prefixed string of exactly
    40 hex characters. Never raises: None, non-strings and "" are just invalid.
    """
    if not isinstance(address, str) or not address:
        return False
    body = address[2:] if address[:2] in ("0x", "0X") else address
    return _HEX_BODY.fullmatch(body) is not None

def format_address(address: str, show_full: bool = False) -> str:
    """Shorten a full-length address to "0x1234...abcd" for display."""
    if show_full or len(address) < FULL_ADDRESS_LENGTH:
        return address
    return f"{address[:6]}...{address[-4:]}"

def canonicalize_address(address: str) -> str:
    """
    Lowercase, unprefixed and left-padded with zeros to 40 characters.
    Idempotent. Longer inputs are kept whole, never truncated.
    """
    clean = normalize_address(address)
    if len(clean) < CANONICAL_WIDTH:
        clean = clean.rjust(CANONICAL_WIDTH, "0")
    return clean
