"""Hand out unique file names recorded in a names-manager file.

A names manager is a text file holding one used name per line.  New
names are built as ``<name><separator><n>``, where ``n`` follows the
number of the last line that starts with the same prefix.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

_NUMBER = re.compile(r"\s*([+-]?\d+)")


def _manager_path(dir_path, manager: str) -> Path:
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)
        return Path(dir_path) / manager
    return Path(manager)


def _append_line(path: Path, line: str) -> None:
    with open(path, "a", encoding="utf-8", newline="") as handle:
        handle.write(line + "\n")


def _read(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _last_number(content: str, prefix: str) -> int:
    index = content.rfind(prefix)
    if index < 0:
        return -1
    end = content.find("\n", index)
    line = content[index:] if end < 0 else content[index:end]
    match = _NUMBER.match(line, len(prefix))
    return int(match.group(1)) if match else -1


def available_file_name(manager: str, dir_path, name: str, separator: str | None) -> str:
    """Return a name unused in the manager file and record it there.

    The manager file lives in ``dir_path`` (made if missing) or in the
    current directory when ``dir_path`` is empty.  Raises ValueError when
    ``manager`` is empty.
    """
    if not manager:
        raise ValueError("the names manager file name cannot be empty")
    path = _manager_path(dir_path, manager)
    prefix = name + (separator or "")
    if path.exists():
        new_name = prefix + str(_last_number(_read(path), prefix) + 1)
    else:
        new_name = prefix + "0"
    _append_line(path, new_name)
    return new_name


def add_name_if_missing(dir_path, manager: str, name: str) -> bool:
    """Record ``name`` in the manager file unless it already appears there.

    Returns True when the name was added, False when it was present.
    """
    path = _manager_path(dir_path, manager)
    if path.exists() and name in _read(path):
        return False
    _append_line(path, name)
    return True


def delete_names_manager(dir_path, manager: str) -> bool:
    """Delete the manager file at ``dir_path`` followed directly by ``manager``.

    ``dir_path`` is joined as given, so it should end with a separator.
    Returns True when the file was removed.
    """
    try:
        os.unlink(f"{dir_path}{manager}")
    except OSError:
        return False
    return True