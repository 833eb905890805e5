"""CIDR allocation core exports."""

from cola.cidr.block import Address, Block, Mask, contains, split
from cola.cidr.comparison import addresses_equal, blocks_equal, is_smaller_mask, masks_equal
from cola.cidr.errors import (
    CidrError,
    CidrParseError,
    ErrorKind,
    InvalidInputRangesError,
    MaskExhaustedError,
    NoAvailableBlockError,
    SearchBudgetExceededError,
)
from cola.cidr.find import DEFAULT_MAX_VISITS, contains_existing, find_available, matches_existing
from cola.cidr.parse import parse_cidr, parse_cidrs, parse_mask

__all__ = [
    "Address",
    "Block",
    "Mask",
    "contains",
    "split",
    "addresses_equal",
    "blocks_equal",
    "is_smaller_mask",
    "masks_equal",
    "CidrError",
    "CidrParseError",
    "ErrorKind",
    "InvalidInputRangesError",
    "MaskExhaustedError",
    "NoAvailableBlockError",
    "SearchBudgetExceededError",
    "DEFAULT_MAX_VISITS",
    "contains_existing",
    "find_available",
    "matches_existing",
    "parse_cidr",
    "parse_cidrs",
    "parse_mask",
]
