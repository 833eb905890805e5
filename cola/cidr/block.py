"""Address, mask and block value types with containment and splitting."""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address, ip_address

from cola.cidr.errors import MaskExhaustedError

IPV4_WIDTH = 32
IPV6_WIDTH = 128

_V4_MAPPED_PREFIX = bytes(10) + b"\xff\xff"


@dataclass(frozen=True, slots=True, eq=False)
class Address:
    """Packed 4 or 16 byte address.

    Equality and hashing use the canonical 16 byte form, so an IPv4 address
    and its IPv4-mapped IPv6 form compare equal.
    """

    packed: bytes

    def __post_init__(self) -> None:
        if len(self.packed) not in (4, 16):
            raise ValueError(f"address must be 4 or 16 bytes, got {len(self.packed)}")

    @classmethod
    def from_int(cls, value: int, length: int) -> Address:
        """Build an address of the given storage length from a canonical integer."""

        if length == 4:
            # only IPv4-mapped canonical values round-trip through 4 bytes
            if value >> 32 != 0xFFFF:
                raise ValueError(f"value {value:#x} does not fit a 4 byte address")
            return cls((value & 0xFFFFFFFF).to_bytes(4, "big"))
        return cls(value.to_bytes(16, "big"))

    def canonical(self) -> bytes:
        if len(self.packed) == 4:
            return _V4_MAPPED_PREFIX + self.packed
        return self.packed

    def is_ipv4(self) -> bool:
        return len(self.packed) == 4 or self.packed.startswith(_V4_MAPPED_PREFIX)

    def __int__(self) -> int:
        return int.from_bytes(self.canonical(), "big")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.canonical() == other.canonical()

    def __hash__(self) -> int:
        return hash(self.canonical())

    def __str__(self) -> str:
        return str(ip_address(self.packed))


@dataclass(frozen=True, slots=True)
class Mask:
    """Prefix length declared against a nominal address width."""

    significant_bits: int
    total_width: int

    def __post_init__(self) -> None:
        if self.total_width not in (IPV4_WIDTH, IPV6_WIDTH):
            raise ValueError(f"mask width must be {IPV4_WIDTH} or {IPV6_WIDTH}, got {self.total_width}")
        if not 0 <= self.significant_bits <= self.total_width:
            raise ValueError(
                f"prefix length {self.significant_bits} out of range for a {self.total_width}-bit mask"
            )

    @property
    def host_bits(self) -> int:
        return self.total_width - self.significant_bits

    def __str__(self) -> str:
        return f"/{self.significant_bits}"


@dataclass(frozen=True, slots=True)
class Block:
    """CIDR block covering the inclusive range ``[first, last]``."""

    address: Address
    mask: Mask

    @property
    def first(self) -> int:
        return int(self.address) & ~((1 << self.mask.host_bits) - 1)

    @property
    def last(self) -> int:
        return int(self.address) | ((1 << self.mask.host_bits) - 1)

    def network(self) -> Block:
        """Return the same block anchored at its first address."""

        return Block(Address.from_int(self.first, len(self.address.packed)), self.mask)

    def __str__(self) -> str:
        if self.mask.total_width == IPV4_WIDTH and self.address.is_ipv4():
            host = str(IPv4Address(self.address.canonical()[12:]))
        else:
            host = str(self.address)
        return f"{host}/{self.mask.significant_bits}"


def contains(parent: Block, child: Block) -> bool:
    """Return True when ``child`` lies entirely inside ``parent`` (inclusive)."""

    return parent.first <= child.first and child.last <= parent.last


def split(block: Block) -> tuple[Block, Block]:
    """Split ``block`` into its lower and upper halves."""

    mask = block.mask
    if mask.significant_bits >= mask.total_width:
        raise MaskExhaustedError(block)

    child_mask = Mask(mask.significant_bits + 1, mask.total_width)
    length = len(block.address.packed)
    base = block.first
    left = Block(Address.from_int(base, length), child_mask)
    right = Block(Address.from_int(base | (1 << child_mask.host_bits), length), child_mask)
    return left, right
