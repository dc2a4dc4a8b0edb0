from __future__ import annotations

from pathlib import Path
from typing import Dict, Set

from .classify import RenameMode, should_rename_class, should_rename_id
from .extract import extract_tokens
from .naming import build_mapping, mapping_to_json
from .rewrite import rewrite_css, rewrite_html

OUTPUT_HTML = "output.html"
OUTPUT_CSS = "output.css"
CLASS_MAP_JSON = "class-map.json"
ID_MAP_JSON = "id-map.json"


class RenameResult:
    def __init__(
        self,
        html: str,
        css: str,
        class_map: Dict[str, str],
        id_map: Dict[str, str],
        class_tokens: Set[str],
        id_tokens: Set[str],
    ):
        self.html = html
        self.css = css
        self.class_map = class_map
        self.id_map = id_map
        self.class_tokens = class_tokens
        self.id_tokens = id_tokens

    def __repr__(self):
        return f"<RenameResult classes={len(self.class_map)}/{len(self.class_tokens)} ids={len(self.id_map)}/{len(self.id_tokens)}>"


def rename_tokens(
    html: str,
    css: str,
    class_prefix: str = "c",
    id_prefix: str = "id",
    mode: RenameMode = RenameMode.DEFAULT,
) -> RenameResult:
    """Extract, classify, name and rewrite in memory. Nothing touches disk here."""
    class_tokens, id_tokens = extract_tokens(html, css)
    class_map = build_mapping(class_tokens, class_prefix, mode, should_rename_class)
    id_map = build_mapping(id_tokens, id_prefix, mode, should_rename_id)
    return RenameResult(
        html=rewrite_html(html, class_map, id_map),
        css=rewrite_css(css, class_map, id_map),
        class_map=class_map,
        id_map=id_map,
        class_tokens=class_tokens,
        id_tokens=id_tokens,
    )


def write_outputs(result: RenameResult, out_dir: Path) -> Dict[str, Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = {
        "html": out_dir / OUTPUT_HTML,
        "css": out_dir / OUTPUT_CSS,
        "class_map": out_dir / CLASS_MAP_JSON,
        "id_map": out_dir / ID_MAP_JSON,
    }
    paths["html"].write_text(result.html, encoding="utf-8")
    paths["css"].write_text(result.css, encoding="utf-8")
    paths["class_map"].write_text(mapping_to_json(result.class_map), encoding="utf-8")
    paths["id_map"].write_text(mapping_to_json(result.id_map), encoding="utf-8")
    return paths
