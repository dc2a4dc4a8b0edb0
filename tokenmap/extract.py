from __future__ import annotations

import re
from typing import List, Set, Tuple

from .patterns import CSS_CLASS_SELECTOR, CSS_ID_SELECTOR, HTML_CLASS_ATTR, HTML_ID_ATTR


def split_class_value(value: str) -> List[str]:
    return [t for t in re.split(r"\s+", value) if t]


def extract_html_class_tokens(html: str) -> Set[str]:
    found = set()
    for m in HTML_CLASS_ATTR.finditer(html):
        found.update(split_class_value(m.group("v")))
    return found


def extract_html_id_tokens(html: str) -> Set[str]:
    found = set()
    for m in HTML_ID_ATTR.finditer(html):
        v = m.group("v").strip()
        if v:
            found.add(v)
    return found


def extract_css_class_tokens(css: str) -> Set[str]:
    return {m.group("c") for m in CSS_CLASS_SELECTOR.finditer(css)}


def extract_css_id_tokens(css: str) -> Set[str]:
    return {m.group("i") for m in CSS_ID_SELECTOR.finditer(css)}


def extract_tokens(html: str, css: str) -> Tuple[Set[str], Set[str]]:
    """Return (class tokens, id tokens) seen across both documents."""
    classes = extract_html_class_tokens(html) | extract_css_class_tokens(css)
    ids = extract_html_id_tokens(html) | extract_css_id_tokens(css)
    return classes, ids
