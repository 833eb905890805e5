import pytest

from cola.cidr import Address, Block, Mask, MaskExhaustedError, contains, parse_cidr, split


@pytest.mark.parametrize(
    ("parent", "child", "want"),
    [
        ("10.0.16.0/20", "10.0.17.0/24", True),
        ("10.0.16.0/20", "10.0.16.0/24", True),
        ("10.0.16.0/20", "10.0.31.0/24", True),
        ("10.0.16.0/20", "10.0.15.0/24", False),
        ("10.0.16.0/20", "10.0.0.0/18", False),
        ("10.0.16.0/20", "10.0.32.0/24", False),
    ],
)
def test_contains(parent: str, child: str, want: bool) -> None:
    assert contains(parse_cidr(parent), parse_cidr(child)) is want


def test_contains_is_reflexive() -> None:
    block = parse_cidr("10.0.0.0/16")

    assert contains(block, block)


def test_contains_across_storage_widths() -> None:
    widened = Block(Address(bytes(10) + b"\xff\xff" + bytes([10, 0, 0, 0])), Mask(16, 32))

    assert contains(widened, parse_cidr("10.0.1.0/24"))
    assert contains(parse_cidr("10.0.0.0/16"), widened)


def test_block_range() -> None:
    block = parse_cidr("10.0.16.0/20")

    assert block.last - block.first == (1 << 12) - 1
    assert block.first & 0xFFFFFFFF == (10 << 24) | (16 << 8)


def test_split_ipv4() -> None:
    left, right = split(parse_cidr("10.0.0.0/16"))

    assert str(left) == "10.0.0.0/17"
    assert str(right) == "10.0.128.0/17"
    assert left == parse_cidr("10.0.0.0/17")
    assert right == parse_cidr("10.0.128.0/17")


def test_split_halves_cover_parent() -> None:
    parent = parse_cidr("192.168.4.0/22")
    left, right = split(parent)

    assert left.first == parent.first
    assert right.last == parent.last
    assert left.last + 1 == right.first


def test_split_ipv6() -> None:
    left, right = split(parse_cidr("2001:db8::/32"))

    assert str(left) == "2001:db8::/33"
    assert str(right) == "2001:db8:8000::/33"


def test_split_keeps_storage_width() -> None:
    widened = Block(Address(bytes(10) + b"\xff\xff" + bytes([10, 0, 0, 0])), Mask(16, 32))
    left, right = split(widened)

    assert len(left.address.packed) == 16
    assert str(right) == "10.0.128.0/17"


def test_split_single_host_raises() -> None:
    host = parse_cidr("10.0.0.1/32")

    with pytest.raises(MaskExhaustedError) as exc_info:
        split(host)

    assert exc_info.value.block == host


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValueError):
        Address(b"\x01\x02\x03")
    with pytest.raises(ValueError):
        Mask(33, 32)
    with pytest.raises(ValueError):
        Mask(8, 64)


def test_network_clears_host_bits() -> None:
    block = Block(Address(bytes([10, 0, 196, 7])), Mask(18, 32))

    assert str(block.network()) == "10.0.192.0/18"
    assert len(block.network().address.packed) == 4


def test_from_int_rejects_values_too_wide_for_four_bytes() -> None:
    with pytest.raises(ValueError):
        Address.from_int(0, 4)
    with pytest.raises(ValueError):
        Address.from_int(1 << 127, 4)

    assert Address.from_int((0xFFFF << 32) | 0x0A000000, 4).packed == bytes([10, 0, 0, 0])


def test_split_four_byte_address_with_wide_mask_raises() -> None:
    block = Block(Address(bytes([10, 0, 0, 0])), Mask(0, 128))

    with pytest.raises(ValueError):
        split(block)
