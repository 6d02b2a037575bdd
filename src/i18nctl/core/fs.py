from __future__ import annotations

import os
import tempfile
from pathlib import Path


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def create_text_file(path: Path, content: str, encoding: str = "utf-8") -> bool:
    """Write `content` to `path` only if nothing exists there yet.

    The payload goes to a sibling temp file first and is hard-linked into
    place, so a reader never sees a partial file and an existing file is never
    replaced. The temp file gets the umask-default mode before linking, as a
    plain `open()` would. Returns False when `path` already existed.
    """
    ensure_dir(path.parent)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            handle.write(content)
        os.chmod(tmp, default_file_mode())
        try:
            os.link(tmp, path)
        except FileExistsError:
            return False
        return True
    finally:
        tmp.unlink(missing_ok=True)
