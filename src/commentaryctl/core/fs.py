from __future__ import annotations

import os
import tempfile
from pathlib import Path


def read_text(path: Path, encoding: str = "utf-8") -> str:
    # newline="" keeps \r\n intact so offsets match the bytes on disk
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def write_text_atomic(path: Path, content: str, encoding: str = "utf-8") -> Path:
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
        if path.exists():
            os.chmod(tmp, path.stat().st_mode & 0o7777)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    return path
