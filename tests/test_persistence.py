from pathlib import Path

import pytest

from src.location_mapper.persistence.filesystem import FileStorage


def test_file_storage_creates_root(tmp_path: Path) -> None:
    root = tmp_path / "nested" / "data"
    storage = FileStorage(root=root)

    assert storage.root == root.resolve()
    assert root.is_dir()


def test_file_storage_writes_and_reads_json(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    storage.write_json("snapshot.json", {"hello": "world"})

    assert (tmp_path / "snapshot.json").read_text(encoding="utf-8") == '{\n  "hello": "world"\n}'
    assert storage.read_json("snapshot.json") == {"hello": "world"}
    assert not list(tmp_path.glob(".snapshot.json.*.tmp"))


def test_file_storage_returns_default_for_missing_file(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    assert storage.read_json("missing.json", default={"locations": []}) == {"locations": []}


def test_file_storage_rejects_invalid_json(tmp_path: Path) -> None:
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    storage = FileStorage(root=tmp_path)

    with pytest.raises(ValueError, match="not valid JSON"):
        storage.read_json("broken.json")
