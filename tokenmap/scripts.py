"""Download remote <script src> assets next to the output HTML and relink them."""
from __future__ import annotations

import hashlib
import math
import os
import re
from typing import Dict, Iterable, List, Optional, Tuple
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests

from .patterns import HTML_SCRIPT_SRC

SKIP_SCHEMES = ("data:", "blob:")
HTTP_SCHEMES = ("http", "https")
SCRIPT_DIR_NAME = "js"


class RelocationResult:
    """Outcome of one relocate_scripts() pass."""

    def __init__(self, html: str, downloaded: Dict[str, str], failures: List[Tuple[str, str]]):
        self.html = html
        self.downloaded = downloaded  # canonical url -> local src
        self.failures = failures      # (url, reason)

    def __repr__(self):
        return f"<RelocationResult downloaded={len(self.downloaded)} failures={len(self.failures)}>"


def validate_base_url(base_url: Optional[str]) -> Optional[str]:
    if not base_url or not base_url.strip():
        return None
    base_url = base_url.strip()
    p = urlsplit(base_url)
    if p.scheme.lower() not in HTTP_SCHEMES or not p.netloc:
        raise ValueError(f"base URL must be an absolute http(s) URL like https://example.com/, got {base_url!r}")
    return base_url


def validate_timeout(value) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"fetch timeout must be a number, got {value!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"fetch timeout must be a positive number of seconds, got {value!r}")
    return timeout


def canonical_url(url: str) -> str:
    p = urlsplit(url)
    # only scheme and host are case-insensitive; userinfo is passed through as-is
    userinfo, at, hostport = p.netloc.rpartition("@")
    netloc = userinfo + at + hostport.lower()
    return urlunsplit((p.scheme.lower(), netloc, p.path or "/", p.query, ""))


def resolve_http_url(src: str, base_url: Optional[str] = None) -> Optional[str]:
    """Return the canonical absolute http(s) URL for src, or None when it can't be resolved."""
    src = (src or "").strip()
    if not src:
        return None
    try:
        p = urlsplit(src)
        if p.scheme:
            if p.scheme.lower() in HTTP_SCHEMES and p.netloc:
                return canonical_url(src)
            return None
        if not base_url:
            return None
        joined = urljoin(base_url, src)
        jp = urlsplit(joined)
        if jp.scheme.lower() in HTTP_SCHEMES and jp.netloc:
            return canonical_url(joined)
    except ValueError:
        # malformed src (e.g. an unclosed IPv6 bracket) is left alone
        return None
    return None


def sanitize_filename(name: str) -> str:
    return re.sub(r'[\\/:*?"<>|\x00-\x1f]', '-', name or '')


def short_sha256(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:20]


def make_stable_js_filename(url: str) -> str:
    last = urlsplit(url).path.rstrip("/").rsplit("/", 1)[-1].strip()
    if last and "." in last:
        # keep whatever extension the server used
        return sanitize_filename(last)
    return f"script-{short_sha256(url)}.js"


def ensure_unique_filename(directory: str, filename: str, reserved: Iterable[str] = ()) -> str:
    taken = set(reserved)
    stem, ext = os.path.splitext(filename)
    candidate = filename
    i = 2
    while candidate in taken or os.path.exists(os.path.join(directory, candidate)):
        candidate = f"{stem}-{i}{ext}"
        i += 1
    return candidate


def combine_urlish(prefix: str, filename: str) -> str:
    if not prefix or not prefix.strip():
        return filename
    if prefix.endswith("/"):
        return prefix + filename
    return prefix + "/" + filename


def replace_src_attribute_value(tag: str, old_src: str, new_src: str) -> str:
    """Swap the src value inside one <script> tag, keeping its quote style."""
    def repl(m: re.Match) -> str:
        if m.group("v").strip() != old_src:
            return m.group(0)
        return f"{m.group(1)}{m.group('q')}{new_src}{m.group('q')}"

    return re.sub(r"""((?<![\w:-])src\s*=\s*)(?P<q>["'])(?P<v>[^"']+)(?P=q)""", repl, tag, flags=re.IGNORECASE)


def collect_script_urls(html: str, base_url: Optional[str] = None) -> List[str]:
    """Unique resolvable script URLs in document order."""
    urls: List[str] = []
    seen = set()
    for m in HTML_SCRIPT_SRC.finditer(html):
        src = m.group("src").strip()
        if not src or src.lower().startswith(SKIP_SCHEMES):
            continue
        url = resolve_http_url(src, base_url)
        if url is None or url in seen:
            continue
        seen.add(url)
        urls.append(url)
    return urls


def fetch_script(session, url: str, timeout: float) -> bytes:
    resp = session.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.content


def relink_scripts(html: str, downloaded: Dict[str, str], base_url: Optional[str] = None) -> str:
    if not downloaded:
        return html

    def repl(m: re.Match) -> str:
        src = m.group("src").strip()
        if src.lower().startswith(SKIP_SCHEMES):
            return m.group(0)
        url = resolve_http_url(src, base_url)
        if url is None or url not in downloaded:
            return m.group(0)
        return replace_src_attribute_value(m.group(0), src, downloaded[url])

    return HTML_SCRIPT_SRC.sub(repl, html)


def relocate_scripts(
    html: str,
    out_dir: str,
    base_url: Optional[str] = None,
    local_prefix: str = "./js",
    session=None,
    timeout: float = 30,
) -> RelocationResult:
    """Fetch every remote script once, save it under out_dir/js and relink the HTML.

    A script that fails to download keeps pointing at its remote URL and is
    reported in RelocationResult.failures; it never aborts the pass.
    """
    base_url = validate_base_url(base_url)
    timeout = validate_timeout(timeout)
    urls = collect_script_urls(html, base_url)
    if not urls:
        return RelocationResult(html, {}, [])

    js_dir = os.path.join(out_dir, SCRIPT_DIR_NAME)
    os.makedirs(js_dir, exist_ok=True)

    own_session = session is None
    http = session if session is not None else requests.Session()
    downloaded: Dict[str, str] = {}
    failures: List[Tuple[str, str]] = []
    written = set()
    try:
        for url in urls:
            filename = ensure_unique_filename(js_dir, make_stable_js_filename(url), written)
            try:
                body = fetch_script(http, url, timeout)
            except requests.RequestException as e:
                print(f"[WARN] Failed to fetch script: {url} -> {e}")
                failures.append((url, str(e)))
                continue
            with open(os.path.join(js_dir, filename), "wb") as f:
                f.write(body)
            written.add(filename)
            downloaded[url] = combine_urlish(local_prefix, filename)
            print(f"[LOG] Downloaded script: {url} -> {downloaded[url]}")
    finally:
        if own_session:
            http.close()

    return RelocationResult(relink_scripts(html, downloaded, base_url), downloaded, failures)
