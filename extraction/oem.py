"""
OEM (manufacturer) classification.

Sellers rarely give the brand its own column, so it is mined from the free text
of each line:

1. Canonical lookup: every token of model + description + extra values, then
   the whole text with spaces removed, is checked against the curated
   vocabulary. First hit wins.
2. Alias fallback: product-family keywords (poweredge, proliant, nexus, ...)
   matched as substrings or exact tokens, in table order.
3. Anything else is "Other".

An explicit manufacturer cell beats classification. It only gets a light
cleanup for the brands sellers spell most inconsistently; any other value is
trusted as written.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from config import FALLBACK_MANUFACTURER
from domain.canonical import LineRecord

from .oem_vocabulary import OEM_ALIASES, OEM_LOOKUP, normalize_oem_value

_NON_ALNUM_RUN_RE = re.compile(r"[^a-z0-9]+")
_HP_TOKEN_RE = re.compile(r"\bhp\b")

# specs keys that are derived, not seller text
_DERIVED_SPEC_KEYS = frozenset({"oem_guess", "drives"})


def _search_text(record: LineRecord) -> str:
    specs = record.get("specs") or {}
    extras = " ".join(str(v) for k, v in specs.items() if k not in _DERIVED_SPEC_KEYS and v)
    return f"{record.get('model') or ''} {record.get('description') or ''} {extras}"


def _tokens(norm: str) -> List[str]:
    return list(dict.fromkeys(norm.split()))


def detect_oem(texts: Iterable[str]) -> str:
    """Classify free text into a manufacturer label ("Other" when nothing matches)."""
    norm = _NON_ALNUM_RUN_RE.sub(" ", " ".join(texts).lower())
    tokens = _tokens(norm)

    for token in tokens:
        canonical = OEM_LOOKUP.get(normalize_oem_value(token))
        if canonical:
            return canonical

    merged = OEM_LOOKUP.get(normalize_oem_value(norm))
    if merged:
        return merged

    token_set = set(tokens)
    for oem, aliases in OEM_ALIASES:
        for alias in aliases:
            cleaned = _NON_ALNUM_RUN_RE.sub(" ", alias.lower()).strip()
            if not cleaned:
                continue
            if cleaned in norm or cleaned in token_set:
                return oem

    return FALLBACK_MANUFACTURER


def classify(record: LineRecord) -> str:
    """Manufacturer label for a normalized record, from its text alone."""
    return detect_oem([_search_text(record)])


def manufacturer_from_cell(value: Optional[str]) -> str:
    """
    Clean up an explicit manufacturer cell.

    Example:
        manufacturer_from_cell("Hewlett Packard Enterprise") -> "HPE"
        manufacturer_from_cell("HUAWEI TECH CO") -> "HUAWEI TECH CO"
    """
    raw = (value or "").strip()
    lc = raw.lower()
    if not lc:
        return ""
    if "cisco" in lc:
        return "Cisco"
    if "netapp" in lc or "net app" in lc:
        return "NetApp"
    if "dell" in lc or "emc" in lc:
        return "Dell"
    if _HP_TOKEN_RE.search(lc) or "hpe" in lc or "hewlett" in lc:
        return "HPE"
    return raw


def resolve_manufacturer(record: LineRecord, explicit: Optional[str] = None) -> str:
    """Explicit (possibly carried-forward) cell first, classification otherwise."""
    from_cell = manufacturer_from_cell(explicit)
    return from_cell or classify(record)
