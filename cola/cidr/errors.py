"""Error kinds raised by the CIDR allocation core."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cola.cidr.block import Block


class ErrorKind(str, Enum):
    """Tag carried by every allocation error."""

    INVALID_INPUT_RANGES = "invalid_input_ranges"
    NO_AVAILABLE_BLOCK = "no_available_block"
    MASK_EXHAUSTED = "mask_exhausted"
    SEARCH_BUDGET_EXCEEDED = "search_budget_exceeded"


class CidrError(Exception):
    """Base class for allocation failures."""

    kind: ErrorKind


class InvalidInputRangesError(CidrError):
    """Raised when a used block lies outside the root block."""

    kind = ErrorKind.INVALID_INPUT_RANGES

    def __init__(self, block: Block) -> None:
        super().__init__(f"input ranges invalid: {block} is not contained in the root CIDR")
        self.block = block


class NoAvailableBlockError(CidrError):
    """Raised when no free block of the requested size exists."""

    kind = ErrorKind.NO_AVAILABLE_BLOCK

    def __init__(self, reason: str = "unable to find available CIDR range") -> None:
        super().__init__(reason)
        self.reason = reason


class MaskExhaustedError(CidrError):
    """Raised when splitting a block that is already a single address."""

    kind = ErrorKind.MASK_EXHAUSTED

    def __init__(self, block: Block) -> None:
        super().__init__(f"cannot split {block}: mask already covers the full address width")
        self.block = block


class SearchBudgetExceededError(CidrError):
    """Raised when the search visits more nodes than allowed."""

    kind = ErrorKind.SEARCH_BUDGET_EXCEEDED

    def __init__(self, max_visits: int) -> None:
        super().__init__(f"search aborted after visiting {max_visits} nodes")
        self.max_visits = max_visits


class CidrParseError(ValueError):
    """Raised when textual CIDR or prefix input cannot be parsed."""
