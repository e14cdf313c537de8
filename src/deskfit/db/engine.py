"""JSON file storage helpers."""

import json
import os
import tempfile
from pathlib import Path

STORAGE_VERSION = 1


def read_json(path: Path):
    """Read a JSON document.

    Returns None when the file does not exist. Decoding and I/O errors
    propagate to the caller.
    """
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def atomic_write_json(path: Path, data) -> None:
    """Write data as JSON so readers never see a partial file.

    The document goes to a temp file in the same directory and is then
    renamed over the target.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def remove_file(path: Path) -> None:
    """Delete a file if it exists."""
    try:
        path.unlink()
    except FileNotFoundError:
        pass
