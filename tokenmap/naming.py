from __future__ import annotations

import hashlib
import json
import re
from typing import Callable, Dict, Iterable

from .classify import RenameMode

FINGERPRINT_LENGTH = 6


def short_stable_hash(text: str, length: int = FINGERPRINT_LENGTH) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:length]


def sanitize_prefix(text: str, default: str = "c") -> str:
    """Reduce a user supplied prefix to characters valid in a CSS identifier."""
    safe = re.sub(r"[^A-Za-z0-9_-]", "", text or "")
    if not safe:
        return default
    if safe[0].isdigit():
        safe = "c" + safe
    return safe


def _candidate_name(prefix: str, counter: int, old: str) -> str:
    return f"{prefix}{counter:03d}_{short_stable_hash(old)}"


def build_mapping(
    candidates: Iterable[str],
    prefix: str,
    mode: RenameMode,
    should_rename: Callable[[str, RenameMode], bool],
) -> Dict[str, str]:
    """Map every selected token to a new name.

    Tokens are ranked in ordinal order, never in discovery order, so the same
    token set always yields the same mapping. The hash suffix only depends on
    the token itself and keeps names recognisable across runs even when the
    rank shifts.
    """
    selected = sorted({t for t in candidates if should_rename(t, mode)})

    used = set()
    mapping: Dict[str, str] = {}
    for counter, old in enumerate(selected, start=1):
        base = _candidate_name(prefix, counter, old)
        new = base
        bump = 1
        while new in used:
            new = f"{base}_{bump}"
            bump += 1
        used.add(new)
        mapping[old] = new
    return mapping


def order_by_key(mapping: Dict[str, str]) -> Dict[str, str]:
    return {k: mapping[k] for k in sorted(mapping)}


def mapping_to_json(mapping: Dict[str, str]) -> str:
    return json.dumps(order_by_key(mapping), ensure_ascii=False, indent=2) + "\n"
