from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, get_type_hints

from ..comparator.compare_util import Comparator, compare, comparing_indexed
from ..helper.toml_utils import dump_toml_to_file, dump_toml_to_str, load_toml_file, select_table

logger = logging.getLogger(__name__)

PYPROJECT_TABLE = "tool.corekit"


class ToolkitSettingsError(Exception):
    pass


@dataclass(slots=True, frozen=True)
class ToolkitSettings:
    # None placement for null-safe comparisons
    null_greater: bool = False
    # default size for PartitionIter.from_settings
    partition_size: int = 100
    # where comparing_indexed puts keys missing from the reference order
    at_end_if_miss: bool = False

    def __post_init__(self):
        hints = get_type_hints(type(self))
        for f in fields(self):
            value = getattr(self, f.name)
            expected = hints[f.name]
            # bool is an int subclass; reject it for int fields
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ToolkitSettingsError(
                    f"{f.name} must be {expected.__name__}, got {type(value).__name__}")
        if self.partition_size < 1:
            raise ToolkitSettingsError(f"partition_size must be >= 1, got {self.partition_size}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> ToolkitSettings:
        data = data or {}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ToolkitSettingsError(f"Unknown setting(s): {', '.join(unknown)}")
        return cls(**{k: data[k] for k in known if k in data})

    @classmethod
    def load_file(cls, path: str | Path) -> ToolkitSettings:
        """
        Load settings from a TOML file.

        - pyproject.toml: the [tool.corekit] table (defaults when absent)
        - anything else (e.g. corekit.toml): the whole file as a flat table
        """
        path = Path(path)
        doc = load_toml_file(path)
        if path.name == "pyproject.toml":
            table = select_table(doc, PYPROJECT_TABLE)
            if table is None:
                logger.debug("[%s] not found in %s -- using defaults", PYPROJECT_TABLE, path)
                return cls()
        else:
            table = doc
        settings = cls.from_mapping(table)
        logger.debug("loaded %r from %s", settings, path)
        return settings

    def to_mapping(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_toml(self, *, indent: int = 2) -> str:
        return dump_toml_to_str(self.to_mapping(), indent)

    def save_file(self, path: str | Path) -> Path:
        path = Path(path)
        dump_toml_to_file(self.to_mapping(), path)
        return path

    def null_safe_comparator(self) -> Comparator:
        null_greater = self.null_greater
        return lambda c1, c2: compare(c1, c2, null_greater=null_greater)

    def indexed_comparator(self, key_extractor: Callable[[Any], Any], objs: Iterable[Any]) -> Comparator:
        return comparing_indexed(key_extractor, objs, at_end_if_miss=self.at_end_if_miss)
