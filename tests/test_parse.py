import pytest

from cola.cidr import CidrParseError, Mask, parse_cidr, parse_cidrs, parse_mask


def test_parse_cidr_ipv4() -> None:
    block = parse_cidr("10.0.0.0/16")

    assert block.address.packed == bytes([10, 0, 0, 0])
    assert block.mask == Mask(16, 32)
    assert str(block) == "10.0.0.0/16"


def test_parse_cidr_clears_host_bits() -> None:
    assert str(parse_cidr(" 10.0.196.0/18 ")) == "10.0.192.0/18"


def test_parse_cidr_ipv6() -> None:
    block = parse_cidr("2001:db8::/32")

    assert len(block.address.packed) == 16
    assert block.mask == Mask(32, 128)


@pytest.mark.parametrize("text", ["10.0.0.0", "10.0.0.0/33", "not-a-cidr/8", ""])
def test_parse_cidr_invalid(text: str) -> None:
    with pytest.raises(CidrParseError):
        parse_cidr(text)


def test_parse_mask() -> None:
    assert parse_mask("24") == Mask(24, 32)
    assert parse_mask("/24") == Mask(24, 32)
    assert parse_mask(64, 128) == Mask(64, 128)


@pytest.mark.parametrize("text", ["", "/", "abc", "-1", "33"])
def test_parse_mask_invalid(text: str) -> None:
    with pytest.raises(CidrParseError):
        parse_mask(text)


def test_parse_cidrs_splits_and_skips_blanks() -> None:
    blocks = parse_cidrs(["10.0.0.0/24,10.0.1.0/24", "", " 10.0.2.0/24 , "])

    assert [str(block) for block in blocks] == ["10.0.0.0/24", "10.0.1.0/24", "10.0.2.0/24"]
