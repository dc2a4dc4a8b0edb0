"""Precompiled matchers shared by the extractor, classifier and rewriter.

Every attribute/selector matcher captures the value in a named group so the
caller can splice a replacement at match.start(<group>) / match.end(<group>)
without rebuilding the surrounding markup.
"""
from __future__ import annotations

import re


# quoted attribute value: q = quote char, v = value up to the matching quote
_QUOTED = r"""(?P<q>["'])(?P<v>(?:(?!(?P=q)).)*)(?P=q)"""
# stricter than \b so that data-class= / data-id= are not picked up
_ATTR_START = r"(?<![\w:-])"
# CSS identifier not glued to a longer token (avoids ".5" in "1.5em")
_SELECTOR_START = r"(?<![A-Za-z0-9_-])"
_CSS_IDENT = r"[_A-Za-z-][A-Za-z0-9_-]*"

HTML_CLASS_ATTR = re.compile(_ATTR_START + r"class\s*=\s*" + _QUOTED, re.IGNORECASE | re.DOTALL)
HTML_ID_ATTR = re.compile(_ATTR_START + r"id\s*=\s*" + _QUOTED, re.IGNORECASE | re.DOTALL)
HTML_HASH_REF_ATTR = re.compile(
    _ATTR_START + r"(?P<attr>xlink:href|href)\s*=\s*"
    r"""(?P<q>["'])(?P<v>\#(?:(?!(?P=q)).)+)(?P=q)""",
    re.IGNORECASE | re.DOTALL,
)
HTML_SCRIPT_SRC = re.compile(
    r"""<script\b[^>]*?(?<![\w:-])src\s*=\s*(?P<q>["'])(?P<src>[^"']+)(?P=q)[^>]*?>""",
    re.IGNORECASE,
)

CSS_CLASS_SELECTOR = re.compile(_SELECTOR_START + r"\.(?P<c>" + _CSS_IDENT + r")")
CSS_ID_SELECTOR = re.compile(_SELECTOR_START + r"\#(?P<i>" + _CSS_IDENT + r")")

# token shapes, always used with fullmatch()
GUID36 = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")
GUID32 = re.compile(r"[0-9a-fA-F]{32}")
HASHY = re.compile(r"[A-Za-z0-9_-]{10,}")
MEANINGFUL = re.compile(r"[a-z][a-z0-9-]{0,24}")
WEBFLOW_NODE_ID = re.compile(r"w-node-[0-9a-fA-F-]{20,}-[A-Za-z0-9_-]+")

WEBFLOW_NODE_PREFIX = "w-node-"
ICON_PREFIXES = ("fa-", "bi-")
