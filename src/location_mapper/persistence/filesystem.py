"""File-based persistence helpers for location snapshots."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from ..config import settings


class FileStorage:
    """Thin wrapper around the data root for reading and writing JSON files."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def resolve(self, path: Path | str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.root / candidate

    def read_json(self, path: Path | str, default: Any = None) -> Any:
        target = self.resolve(path)
        if not target.exists():
            return default
        with target.open("r", encoding="utf-8") as handle:
            try:
                return json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Snapshot file '{target}' is not valid JSON") from exc

    def write_json(self, path: Path | str, data: Any, *, indent: int = 2) -> None:
        """Write JSON through a temporary file so readers never see a partial document."""

        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, ensure_ascii=False, indent=indent)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
