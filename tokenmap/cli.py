#!/usr/bin/env python3
"""
Rename generated class/id tokens in an HTML + CSS pair.

  tokenmap --html page.html --css page.css --out renamed

Writes output.html, output.css, class-map.json and id-map.json into --out.
With --download-scripts, remote <script src> files are also saved to
<out>/js and output.html is relinked to the local copies.

Defaults can come from .env: OUTPUT_DIR, CLASS_PREFIX, ID_PREFIX, RENAME_MODE,
DOWNLOAD_SCRIPTS, BASE_URL, SCRIPT_PREFIX, FETCH_TIMEOUT.
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .classify import RenameMode
from .naming import sanitize_prefix
from .pipeline import rename_tokens, write_outputs
from .scripts import relocate_scripts, validate_base_url, validate_timeout


def env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Rename opaque generated class/id tokens in HTML/CSS to short stable names.")
    p.add_argument("--html", required=True, help="Input HTML file")
    p.add_argument("--css", required=True, help="Input CSS file")
    p.add_argument("--out", default=os.getenv("OUTPUT_DIR", "."), help="Output directory (created if missing)")
    p.add_argument("--class-prefix", default=os.getenv("CLASS_PREFIX", "c"), help="Prefix for renamed classes (default: c)")
    p.add_argument("--id-prefix", default=os.getenv("ID_PREFIX", "id"), help="Prefix for renamed ids (default: id)")
    p.add_argument("--mode", default=os.getenv("RENAME_MODE", "default"),
                   help="default = GUIDs and long opaque tokens, strict (or guid) = GUIDs only")
    p.add_argument("--download-scripts", action="store_true", default=env_flag("DOWNLOAD_SCRIPTS"),
                   help="Download remote <script src> files into <out>/js and relink them")
    p.add_argument("--base-url", default=os.getenv("BASE_URL"),
                   help="Base URL for relative script src values (e.g. https://example.com/)")
    p.add_argument("--script-prefix", default=os.getenv("SCRIPT_PREFIX", "./js"),
                   help="Prefix written into relinked src attributes (default: ./js)")
    p.add_argument("--fetch-timeout", default=os.getenv("FETCH_TIMEOUT", "30"), help="Seconds per script request")
    p.add_argument("--dry-run", action="store_true", help="Report what would be renamed; write nothing")
    return p


def read_input(path: Path, label: str) -> str:
    if not path.is_file():
        raise FileNotFoundError(f"{label} file not found: {path}")
    return path.read_text(encoding="utf-8")


def run(args: argparse.Namespace) -> int:
    mode = RenameMode.parse(args.mode)
    class_prefix = sanitize_prefix(args.class_prefix, "c")
    id_prefix = sanitize_prefix(args.id_prefix, "id")
    timeout = validate_timeout(args.fetch_timeout)
    base_url = validate_base_url(args.base_url) if args.download_scripts else None

    html_path = Path(args.html).resolve()
    css_path = Path(args.css).resolve()
    out_dir = Path(args.out).resolve()

    html = read_input(html_path, "HTML")
    css = read_input(css_path, "CSS")
    print(f"[LOG] Mode={mode.value} class-prefix={class_prefix} id-prefix={id_prefix}")

    result = rename_tokens(html, css, class_prefix, id_prefix, mode)
    print(f"[LOG] Tokens: {len(result.class_tokens)} classes, {len(result.id_tokens)} ids")

    if args.dry_run:
        print(f"[DRY-RUN] Would rename {len(result.class_map)} classes, {len(result.id_map)} ids")
        return 0

    paths = write_outputs(result, out_dir)

    if args.download_scripts:
        reloc = relocate_scripts(
            result.html,
            str(out_dir),
            base_url=base_url,
            local_prefix=args.script_prefix,
            timeout=timeout,
        )
        if reloc.downloaded:
            paths["html"].write_text(reloc.html, encoding="utf-8")
        print(f"[LOG] Scripts: {len(reloc.downloaded)} downloaded, {len(reloc.failures)} failed")

    print("[DONE]")
    print(f"HTML        : {paths['html']}")
    print(f"CSS         : {paths['css']}")
    print(f"Class map   : {paths['class_map']}")
    print(f"ID map      : {paths['id_map']}")
    print(f"Renamed     : {len(result.class_map)} classes, {len(result.id_map)} ids")
    return 0


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
