import pytest

from emojified.services.address import canonicalize_address, format_address, is_valid_address

HEX40 = "1234567890123456789012345678901234567890"


class _Ambiguous:
    """Truth value cannot be decided, like a multi-element array."""

    def __bool__(self):
        raise ValueError("truth value is ambiguous")


# ---------------------------------------------------------------------------
# is_valid_address
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "address",
    [
        "0x" + HEX40,
        HEX40,
        "0xabcdefABCDEF1234567890123456789012345678",
        "0X" + HEX40,
    ],
)
def test_accepts_well_formed(address):
    assert is_valid_address(address) is True


@pytest.mark.parametrize(
    "address",
    [
        "",
        None,
        42,
        b"0x" + HEX40.encode(),
        "0x123",
        "0x" + HEX40[:-1],
        "0x" + HEX40 + "1",
        "0x123456789012345678901234567890123456789g",
        "0x" + HEX40[:20] + " " + HEX40[21:],
        "0x" + HEX40 + "\n",
        "0x0x" + HEX40[:38],
        "0x",
        _Ambiguous(),
    ],
)
def test_rejects_malformed(address):
    assert is_valid_address(address) is False


# ---------------------------------------------------------------------------
# format_address
# ---------------------------------------------------------------------------


def test_format_truncates_full_length():
    assert format_address("0x" + HEX40) == "0x1234...7890"


def test_format_show_full_returns_input():
    assert format_address("0x" + HEX40, True) == "0x" + HEX40


def test_format_short_is_verbatim():
    assert format_address("0x1234") == "0x1234"
    # 40 characters without prefix is still below the truncation length
    assert format_address(HEX40) == HEX40


def test_format_does_not_validate():
    junk = "not-an-address-but-long-enough-to-be-shortened"
    assert format_address(junk) == "not-an...ened"


# ---------------------------------------------------------------------------
# canonicalize_address
# ---------------------------------------------------------------------------


def test_canonical_form():
    assert canonicalize_address("0xABCDEF") == "0" * 34 + "abcdef"
    assert canonicalize_address("0X" + HEX40.upper()) == HEX40


def test_canonicalize_is_idempotent():
    for raw in ("", "0x1", "0xDEADbeef", "0x" + HEX40, HEX40 + "ff"):
        once = canonicalize_address(raw)
        assert canonicalize_address(once) == once


def test_canonicalize_never_truncates():
    longer = HEX40 + "abcd"
    assert canonicalize_address(longer) == longer
