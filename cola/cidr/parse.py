"""Parse textual CIDR notation into core block and mask values."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterable

from cola.cidr.block import IPV4_WIDTH, IPV6_WIDTH, Address, Block, Mask
from cola.cidr.errors import CidrParseError


def parse_cidr(text: str) -> Block:
    """Parse ``addr/prefix`` into a block anchored at its network address."""

    raw = text.strip()
    if "/" not in raw:
        raise CidrParseError(f"invalid CIDR {text!r}: missing prefix length")
    try:
        # host bits are cleared, matching the network address form
        network = ipaddress.ip_network(raw, strict=False)
    except ValueError as exc:
        raise CidrParseError(f"invalid CIDR {text!r}: {exc}") from exc

    width = IPV4_WIDTH if network.version == 4 else IPV6_WIDTH
    return Block(Address(network.network_address.packed), Mask(network.prefixlen, width))


def parse_mask(text: str | int, total_width: int = IPV4_WIDTH) -> Mask:
    """Parse a prefix length such as ``24`` or ``/24``."""

    raw = str(text).strip().removeprefix("/")
    if not raw.isdigit():
        raise CidrParseError(f"invalid prefix length {text!r}")
    try:
        return Mask(int(raw), total_width)
    except ValueError as exc:
        raise CidrParseError(str(exc)) from exc


def parse_cidrs(values: Iterable[str]) -> list[Block]:
    """Parse CIDRs, splitting comma separated entries and skipping blanks."""

    blocks: list[Block] = []
    for value in values:
        for item in value.split(","):
            if item.strip():
                blocks.append(parse_cidr(item))
    return blocks
