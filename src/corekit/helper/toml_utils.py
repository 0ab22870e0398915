from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import tomli
import tomli_w


def load_toml_file(path: str | Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomli.load(f)


def dump_toml_to_str(data: Mapping[str, Any], indent: int = 2) -> str:
    return tomli_w.dumps(data, indent=indent)


def dump_toml_to_file(data: Mapping[str, Any], path: str | Path) -> None:
    Path(path).write_text(dump_toml_to_str(data), encoding="utf-8")


def select_table(doc: Mapping[str, Any], table_path: str | None) -> Mapping[str, Any] | None:
    """
    Walk a dotted table path (e.g. "tool.corekit") down a parsed document.

    Returns None when any segment is missing or is not a table. A None or
    empty path selects the whole document.
    """
    if not table_path:
        return doc
    node: Any = doc
    for key in table_path.split("."):
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node if isinstance(node, Mapping) else None
