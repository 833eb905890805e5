"""CIDR allocation workflow wrapping the search core with logging."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

import structlog

from cola.cidr import Block, CidrError, Mask, find_available, parse_cidr, parse_cidrs, parse_mask


class AllocationSettings(Protocol):
    """Protocol for settings used by the allocation service."""

    max_visits: int | None


@dataclass(slots=True)
class AllocationService:
    """Finds free CIDR blocks and reports the outcome to the log."""

    settings: AllocationSettings
    _logger: Any = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = structlog.get_logger(__name__).bind(max_visits=self.settings.max_visits)

    def find(self, root: Block, desired_mask: Mask, used: Iterable[Block]) -> Block:
        """Return the first available block, logging and re-raising failures."""

        used = list(used)
        log = self._logger.bind(root=str(root), desired_mask=str(desired_mask), used_count=len(used))
        log.debug("Searching for available CIDR", used=[str(block) for block in used])

        try:
            result = find_available(root, desired_mask, used, max_visits=self.settings.max_visits)
        except CidrError as exc:
            log.warning("CIDR allocation failed", kind=exc.kind.value, error=str(exc))
            raise

        log.info("Available CIDR found", cidr=str(result))
        return result

    def find_from_text(self, root_cidr: str, desired_prefix: str | int, used_cidrs: Sequence[str]) -> Block:
        """Parse textual inputs and run :meth:`find`.

        The mask width follows the root block's address family.
        """

        root = parse_cidr(root_cidr)
        desired_mask = parse_mask(desired_prefix, root.mask.total_width)
        return self.find(root, desired_mask, parse_cidrs(used_cidrs))
