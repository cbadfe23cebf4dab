"""
Manufacturer partitioning of normalized records into lot proposals.

One upload becomes one lot per manufacturer by default when several
manufacturers are present ("split"), or a single combined lot ("keep").
The operator can flip the decision, unapprove individual groups and attach
buyer invitations per group before anything is materialized.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence

from config import COMBINED_MANUFACTURER, DEFAULT_LOT_TITLE, FALLBACK_MANUFACTURER
from domain.canonical import LineRecord, LotGroup, LotProposal

logger = logging.getLogger(__name__)


class SplitMode(str, Enum):
    AUTO = "auto"
    SPLIT = "split"
    KEEP = "keep"


def partition(records: Sequence[LineRecord]) -> List[LotGroup]:
    """Group records by manufacturer, in first-seen order."""
    groups: Dict[str, LotGroup] = {}
    for record in records:
        label = record.get("manufacturer") or FALLBACK_MANUFACTURER
        group = groups.get(label)
        if group is None:
            group = groups[label] = LotGroup(manufacturer=label)
        group.records.append(record)
    return list(groups.values())


def default_split_mode(groups: Sequence[LotGroup]) -> SplitMode:
    return SplitMode.SPLIT if len(groups) > 1 else SplitMode.KEEP


def resolve_split_mode(mode: SplitMode | str, groups: Sequence[LotGroup]) -> SplitMode:
    mode = SplitMode(mode)
    if mode is SplitMode.AUTO:
        return default_split_mode(groups)
    return mode


def apply_group_choices(
    groups: Iterable[LotGroup],
    approvals: Optional[Mapping[str, bool]] = None,
    buyer_invites: Optional[Mapping[str, Iterable[str]]] = None,
) -> List[LotGroup]:
    """Copy operator approvals / buyer selections (keyed by manufacturer label) onto groups."""
    approvals = approvals or {}
    buyer_invites = buyer_invites or {}
    out: List[LotGroup] = []
    for g in groups:
        out.append(
            LotGroup(
                manufacturer=g.manufacturer,
                records=g.records,
                approved=approvals.get(g.manufacturer, g.approved),
                buyer_ids=frozenset(buyer_invites.get(g.manufacturer, g.buyer_ids)),
            )
        )
    return out


def _combined_label(groups: Sequence[LotGroup]) -> str:
    if len(groups) == 1:
        return groups[0].manufacturer
    return COMBINED_MANUFACTURER


def keep_as_one(
    records: Sequence[LineRecord],
    groups: Sequence[LotGroup],
    base_title: str | None = None,
    buyer_ids: FrozenSet[str] = frozenset(),
) -> LotProposal:
    """Single proposal holding every record in original row order."""
    return LotProposal(
        title=(base_title or "").strip() or DEFAULT_LOT_TITLE,
        manufacturer=_combined_label(groups),
        records=list(records),
        buyer_ids=frozenset(buyer_ids),
    )


def plan_lots(
    records: Sequence[LineRecord],
    groups: Sequence[LotGroup],
    split_mode: SplitMode | str = SplitMode.AUTO,
    base_title: str | None = None,
    combined_buyer_ids: Optional[Iterable[str]] = None,
) -> List[LotProposal]:
    """
    Turn groups into the proposals handed to the lot materializer.

    Split mode drops unapproved groups. An explicit keep ignores per-group
    approval; an automatic keep (single manufacturer) still honours it. Keep
    mode buyers are `combined_buyer_ids`, or the only group's buyers when the
    upload has a single manufacturer.
    """
    if not records:
        return []

    requested = SplitMode(split_mode)
    mode = resolve_split_mode(requested, groups)
    if mode is SplitMode.KEEP:
        if requested is SplitMode.AUTO and not all(g.approved for g in groups):
            logger.info("Skipping unapproved manufacturer group")
            return []
        if combined_buyer_ids is not None:
            buyers = frozenset(combined_buyer_ids)
        elif len(groups) == 1:
            buyers = groups[0].buyer_ids
        else:
            buyers = frozenset()
        return [keep_as_one(records, groups, base_title, buyers)]

    proposals = [
        LotProposal(
            title=g.title(base_title),
            manufacturer=g.manufacturer,
            records=list(g.records),
            buyer_ids=g.buyer_ids,
        )
        for g in groups
        if g.approved
    ]
    skipped = len(groups) - len(proposals)
    if skipped:
        logger.info("Skipping %d unapproved manufacturer group(s)", skipped)
    return proposals
