"""Apply class/id mappings to HTML and CSS text.

Only the captured value of each match is replaced; a match whose value has no
mapping entry comes back exactly as it was found.
"""
from __future__ import annotations

import re
from typing import Dict

from .extract import split_class_value
from .patterns import (
    CSS_CLASS_SELECTOR,
    CSS_ID_SELECTOR,
    HTML_CLASS_ATTR,
    HTML_HASH_REF_ATTR,
    HTML_ID_ATTR,
)


def replace_group_value(m: re.Match, group: str, new_value: str) -> str:
    """Return m.group(0) with the span of `group` replaced by new_value."""
    full = m.group(0)
    start = m.start(group) - m.start(0)
    end = m.end(group) - m.start(0)
    return full[:start] + new_value + full[end:]


def rewrite_html_classes(html: str, class_map: Dict[str, str]) -> str:
    if not class_map:
        return html

    def repl(m: re.Match) -> str:
        tokens = split_class_value(m.group("v"))
        if not any(t in class_map for t in tokens):
            return m.group(0)
        new = " ".join(class_map.get(t, t) for t in tokens)
        return replace_group_value(m, "v", new)

    return HTML_CLASS_ATTR.sub(repl, html)


def rewrite_html_ids(html: str, id_map: Dict[str, str]) -> str:
    if not id_map:
        return html

    def repl(m: re.Match) -> str:
        v = m.group("v")
        if v in id_map:
            return replace_group_value(m, "v", id_map[v])
        core = v.strip()
        if core and core != v and core in id_map:
            # keep stray whitespace inside the quotes
            return replace_group_value(m, "v", v.replace(core, id_map[core], 1))
        return m.group(0)

    return HTML_ID_ATTR.sub(repl, html)


def rewrite_hash_refs(html: str, id_map: Dict[str, str]) -> str:
    """Point href="#x" / xlink:href="#x" at the renamed id."""
    if not id_map:
        return html

    def repl(m: re.Match) -> str:
        target = m.group("v")[1:]
        if target in id_map:
            return replace_group_value(m, "v", "#" + id_map[target])
        return m.group(0)

    return HTML_HASH_REF_ATTR.sub(repl, html)


def rewrite_css_classes(css: str, class_map: Dict[str, str]) -> str:
    if not class_map:
        return css

    def repl(m: re.Match) -> str:
        c = m.group("c")
        if c in class_map:
            return replace_group_value(m, "c", class_map[c])
        return m.group(0)

    return CSS_CLASS_SELECTOR.sub(repl, css)


def rewrite_css_ids(css: str, id_map: Dict[str, str]) -> str:
    if not id_map:
        return css

    def repl(m: re.Match) -> str:
        i = m.group("i")
        if i in id_map:
            return replace_group_value(m, "i", id_map[i])
        return m.group(0)

    return CSS_ID_SELECTOR.sub(repl, css)


def rewrite_html(html: str, class_map: Dict[str, str], id_map: Dict[str, str]) -> str:
    out = rewrite_html_classes(html, class_map)
    out = rewrite_html_ids(out, id_map)
    return rewrite_hash_refs(out, id_map)


def rewrite_css(css: str, class_map: Dict[str, str], id_map: Dict[str, str]) -> str:
    out = rewrite_css_classes(css, class_map)
    return rewrite_css_ids(out, id_map)
