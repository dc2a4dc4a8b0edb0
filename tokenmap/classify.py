"""Decide which class/id tokens are generated noise and which are authored names.

Each rule is a small predicate; the chain in should_rename_class() returns on
the first rule that applies, so rule order is the policy.
"""
from __future__ import annotations

from enum import Enum

from .patterns import (
    GUID32,
    GUID36,
    HASHY,
    ICON_PREFIXES,
    MEANINGFUL,
    WEBFLOW_NODE_ID,
    WEBFLOW_NODE_PREFIX,
)


class RenameMode(Enum):
    STRICT = "strict"    # GUID shapes only
    DEFAULT = "default"  # GUID shapes or any long opaque token

    @classmethod
    def parse(cls, text: str) -> "RenameMode":
        key = (text or "").strip().lower()
        if key in ("strict", "guid"):
            return cls.STRICT
        if key in ("default", "hashy", ""):
            return cls.DEFAULT
        raise ValueError(f"Unknown rename mode: {text!r} (expected 'default' or 'strict')")


def is_blank(token: str) -> bool:
    return not token or not token.strip()


def is_icon_token(token: str) -> bool:
    lower = token.lower()
    return any(lower.startswith(p) for p in ICON_PREFIXES)


def is_meaningful(token: str) -> bool:
    return MEANINGFUL.fullmatch(token) is not None


def is_guid(token: str) -> bool:
    return GUID36.fullmatch(token) is not None or GUID32.fullmatch(token) is not None


def is_hashy(token: str) -> bool:
    # NOTE: also catches long authored names like "hero_section_title"
    return HASHY.fullmatch(token) is not None


def is_webflow_node_id(token: str) -> bool:
    return token.startswith(WEBFLOW_NODE_PREFIX) or WEBFLOW_NODE_ID.fullmatch(token) is not None


def should_rename_class(token: str, mode: RenameMode) -> bool:
    if is_blank(token):
        return False
    if is_icon_token(token):
        return False
    if is_meaningful(token):
        return False
    if is_guid(token):
        return True
    if mode is RenameMode.DEFAULT and is_hashy(token):
        return True
    return False


def should_rename_id(token: str, mode: RenameMode) -> bool:
    """Webflow node ids drive grid placement, so they are renamed in every mode."""
    if is_blank(token):
        return False
    if is_webflow_node_id(token):
        return True
    return should_rename_class(token, mode)
