from __future__ import annotations

from pathlib import Path

from core.emit.writer import module_dir, module_path, remove_module, write_module


def test_module_path_uses_snake_case_family(tmp_path: Path) -> None:
    assert module_path(tmp_path, "color-hdr") == tmp_path / "color_hdr" / "mod.rs"


def test_write_module_creates_directories_and_replaces(tmp_path: Path) -> None:
    out_root = tmp_path / "crates" / "values"

    write_module(out_root, "sizing", "old\n")
    path = write_module(out_root, "sizing", "new\n")

    assert path.read_text(encoding="utf-8") == "new\n"
    assert sorted(item.name for item in path.parent.iterdir()) == ["mod.rs"]


def test_remove_module_deletes_directory_recursively(tmp_path: Path) -> None:
    write_module(tmp_path, "page-floats", "x\n")
    (module_dir(tmp_path, "page-floats") / "types.rs").write_text("y\n", encoding="utf-8")

    assert remove_module(tmp_path, "page-floats") is True
    assert not module_dir(tmp_path, "page-floats").exists()


def test_remove_module_tolerates_absence(tmp_path: Path) -> None:
    assert remove_module(tmp_path, "ui") is False
