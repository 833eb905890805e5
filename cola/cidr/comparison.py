"""Equality and ordering primitives for addresses, masks and blocks."""

from cola.cidr.block import Address, Block, Mask


def addresses_equal(a: Address, b: Address) -> bool:
    return a.canonical() == b.canonical()


def masks_equal(x: Mask, y: Mask) -> bool:
    # total_width is compared as declared, not against the address length
    return x.significant_bits == y.significant_bits and x.total_width == y.total_width


def is_smaller_mask(smaller: Mask, larger: Mask) -> bool:
    """Return True when ``smaller`` describes a more specific range than ``larger``."""

    return smaller.significant_bits > larger.significant_bits


def blocks_equal(x: Block, y: Block) -> bool:
    return addresses_equal(x.address, y.address) and masks_equal(x.mask, y.mask)
