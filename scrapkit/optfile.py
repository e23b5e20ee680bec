"""Read and write option files.

An option file holds entries of the form ``{name -> value}``.  An array
option keeps its values in parentheses, either on one line,
``{name -> (value)}``, or one value per line::

    {name -> (
    first
    second
    )}
"""

from __future__ import annotations

import re
from pathlib import Path

_ARROW = "->"
_WORD = re.compile(r"[0-9A-Za-z]+")


def _read(path) -> str:
    with open(Path(path), encoding="utf-8", newline="") as handle:
        return handle.read()


def _find_name(content: str, name: str, start: int = 0) -> int:
    """Return the index of ``name`` written as ``{name ->``, or -1."""
    if not name:
        return -1
    length = len(name)
    position = start
    while position < len(content):
        index = content.find(name, position)
        if index < 0:
            return -1
        if (
            index > 0
            and content[index - 1] == "{"
            and content[index + length:index + length + 1] == " "
            and content.find(_ARROW, index) == index + length + 1
        ):
            return index
        position = index + length
    return -1


def _find_value(content: str, name: str, start: int = 0) -> tuple[str, int] | None:
    """Return the value of ``name`` at or after ``start`` and the index of its ``}``."""
    index = _find_name(content, name, start)
    if index < 0:
        return None
    value_start = content.find(_ARROW, index) + len(_ARROW)
    while content[value_start:value_start + 1] == " ":
        value_start += 1
    end = content.find("}", value_start)
    if end < 0:
        return None
    return content[value_start:end], end


def get_option_value(path, name: str) -> str | None:
    """Return the value of the first option ``name`` in the file, or None."""
    found = _find_value(_read(path), name)
    return None if found is None else found[0]


def get_all_option_values(path, name: str) -> list[str]:
    """Return the values of every option ``name`` in the file, in order."""
    content = _read(path)
    values: list[str] = []
    position = 0
    while position < len(content):
        found = _find_value(content, name, position)
        if found is None:
            break
        value, end = found
        values.append(value)
        position = end + 1
    return values


def get_array_option_values(path, name: str) -> list[str]:
    """Return the values of the array option ``name``.

    The values are the runs of ASCII letters and digits between the
    parentheses; everything else separates them.  An option that is
    missing or has no parentheses gives an empty list.
    """
    content = _read(path)
    index = _find_name(content, name)
    if index < 0:
        return []
    opening = content.find("(", index)
    if opening < 0:
        return []
    closing = content.find(")", opening + 1)
    if closing < 0:
        return []
    return _WORD.findall(content, opening + 1, closing)


class OptionWriter:
    """Appends options to a file, after a header line.

    Closing the writer ends the block with an empty line.  It can be used
    as a context manager.
    """

    def __init__(self, path, header: str) -> None:
        self.path = Path(path)
        self._handle = open(self.path, "a", encoding="utf-8", newline="")
        self._handle.write(f"{header}\n")

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def write_option(self, name: str, value: str) -> None:
        """Write a single ``{name -> value}`` entry."""
        self._handle.write(f"{{{name} -> {value}}}\n")

    def write_array(self, name: str, values) -> None:
        """Write an array entry: on one line for one value, else one per line."""
        values = list(values)
        if len(values) == 1:
            self._handle.write(f"{{{name} -> ({values[0]})}}\n")
            return
        lines = [f"{{{name} -> ("]
        lines.extend(str(value) for value in values)
        lines.append(")}")
        self._handle.write("\n".join(lines) + "\n")

    def close(self) -> None:
        """End the block with an empty line and close the file."""
        if self._handle.closed:
            return
        self._handle.write("\n")
        self._handle.close()

    def __enter__(self) -> "OptionWriter":
        return self

    def __exit__(self, *args) -> None:
        self.close()