"""Generated module placement, atomic writes and removal."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from core.utils.events import log_event
from core.utils.naming import snake

logger = logging.getLogger("valuegen.emit")

MODULE_FILENAME = "mod.rs"


def module_dir(out_root: Path, family: str) -> Path:
    return out_root / snake(family)


def module_path(out_root: Path, family: str) -> Path:
    return module_dir(out_root, family) / MODULE_FILENAME


def write_module(out_root: Path, family: str, text: str) -> Path:
    """Replace the family's generated module, creating missing directories."""

    path = module_path(out_root, family)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, raw_tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f"{path.name}.",
        suffix=".tmp",
    )
    tmp_path = Path(raw_tmp_path)

    try:
        with open(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        tmp_path.replace(path)
    except Exception:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
        raise

    log_event(logger, logging.INFO, "module_written", family=family, path=str(path))
    return path


def remove_module(out_root: Path, family: str) -> bool:
    """Delete the family's module directory recursively; absence is not an error."""

    directory = module_dir(out_root, family)
    if not directory.exists():
        return False
    shutil.rmtree(directory)
    log_event(logger, logging.INFO, "module_removed", family=family, path=str(directory))
    return True
