from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    key_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(
    source_map: Optional[Dict[str, Dict[str, int]]],
    key_path: Optional[str],
    file_path: Optional[Path] = None,
) -> SourceLocation:
    if not source_map or not key_path:
        return SourceLocation(file_path=file_path, key_path=key_path)

    entry = source_map.get(key_path)
    if not entry:
        return SourceLocation(file_path=file_path, key_path=key_path)

    return SourceLocation(
        file_path=file_path,
        key_path=key_path,
        line=entry.get("line"),
        column=entry.get("column"),
    )


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc or loc.file_path is None:
        return ""

    if loc.line is not None and loc.column is not None:
        return f" (source= {loc.file_path}:{loc.line}:{loc.column})"
    if loc.line is not None:
        return f" (source= {loc.file_path}:{loc.line})"
    return f" (source= {loc.file_path})"
