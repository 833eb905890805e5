"""Search for the first free CIDR block of a requested size."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cola.cidr.block import Block, Mask, contains, split
from cola.cidr.comparison import blocks_equal, is_smaller_mask, masks_equal
from cola.cidr.errors import (
    InvalidInputRangesError,
    NoAvailableBlockError,
    SearchBudgetExceededError,
)

DEFAULT_MAX_VISITS = 1 << 20


def find_available(
    root: Block,
    desired_mask: Mask,
    used: Iterable[Block],
    *,
    max_visits: int | None = DEFAULT_MAX_VISITS,
) -> Block:
    """Return the lowest free block of ``desired_mask`` size inside ``root``.

    The subdivision tree under ``root`` is walked depth first, lower half
    before upper half. An internal node equal to a used block is pruned. A
    node of the desired size is accepted unless it equals or contains a used
    block.

    Example, root 10.0.0.0/16, used 10.0.0.0/18, 10.0.64.0/20 and
    10.0.80.0/24, desired /21::

        10.0.0.0/16
        └─ 10.0.0.0/17
           ├─ 10.0.0.0/18            used, pruned
           └─ 10.0.64.0/18
              └─ 10.0.64.0/19
                 ├─ 10.0.64.0/20     used, pruned
                 └─ 10.0.80.0/20
                    ├─ 10.0.80.0/21  contains 10.0.80.0/24
                    └─ 10.0.88.0/21  result

    Raises:
        InvalidInputRangesError: a used block is not inside ``root``.
        NoAvailableBlockError: no free block of the requested size exists.
        MaskExhaustedError: a split was attempted on a single-address block.
        SearchBudgetExceededError: more than ``max_visits`` nodes were visited.
    """

    used = list(used)
    verify_contained(root, used)
    # tree nodes are always aligned, so compare against aligned reservations
    used = [block.network() for block in used]

    if is_smaller_mask(root.mask, desired_mask):
        raise NoAvailableBlockError("desired mask is larger than available CIDR")

    if masks_equal(root.mask, desired_mask):
        if not used:
            return root
        raise NoAvailableBlockError()

    pending = [root.network()]
    visits = 0
    while pending:
        visits += 1
        if max_visits is not None and visits > max_visits:
            raise SearchBudgetExceededError(max_visits)

        current = pending.pop()
        if masks_equal(current.mask, desired_mask):
            if not matches_existing(current, used) and not contains_existing(current, used):
                return current
            continue

        if matches_existing(current, used):
            continue

        left, right = split(current)
        pending.append(right)
        pending.append(left)

    raise NoAvailableBlockError()


def verify_contained(root: Block, used: Iterable[Block]) -> None:
    for block in used:
        if not contains(root, block):
            raise InvalidInputRangesError(block)


def matches_existing(current: Block, used: Sequence[Block]) -> bool:
    return any(blocks_equal(current, block) for block in used)


def contains_existing(current: Block, used: Sequence[Block]) -> bool:
    """Return True when ``current`` contains any of the ``used`` blocks."""

    return any(contains(current, block) for block in used)
