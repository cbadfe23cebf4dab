"""
Hand-off of approved lot proposals to a lot materializer.

The materializer owns persistence (lot entity, cost basis, line items,
buyer invitations). Each proposal is an independent unit: a failure on one is
recorded in its result and the remaining proposals are still submitted.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Protocol, Sequence, TypeVar

from config import LINE_ITEM_BATCH_SIZE
from domain.canonical import LotProposal, MaterializationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LotMaterializer(Protocol):
    def create_lot(self, proposal: LotProposal) -> str:
        """Persist one lot with its line items and return the new lot id."""
        ...


def batched(items: Sequence[T], size: int = LINE_ITEM_BATCH_SIZE) -> Iterator[Sequence[T]]:
    """Consecutive slices of `items` in original order."""
    if size <= 0:
        raise ValueError(f"batch size must be a positive integer, got: {size}")
    for start in range(0, len(items), size):
        yield items[start:start + size]


def materialize_lots(
    proposals: Sequence[LotProposal],
    materializer: LotMaterializer,
) -> List[MaterializationResult]:
    """Submit each proposal once; return one result per proposal, in order."""
    results: List[MaterializationResult] = []
    for proposal in proposals:
        try:
            lot_id = materializer.create_lot(proposal)
        except Exception as e:
            logger.exception("Failed to create lot %r", proposal.title)
            results.append(
                MaterializationResult(
                    title=proposal.title,
                    manufacturer=proposal.manufacturer,
                    error=str(e) or type(e).__name__,
                )
            )
            continue

        logger.info("Created lot %r (%d lines) as %s", proposal.title, len(proposal.records), lot_id)
        results.append(
            MaterializationResult(title=proposal.title, manufacturer=proposal.manufacturer, lot_id=lot_id)
        )
    return results
