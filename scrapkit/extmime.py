"""Lookup between file extensions and MIME types.

The table is plain text, one entry per line, of the form::

    .ext1|.ext2:type/one|type/two

Extensions come before the colon and MIME types after it, each list
separated by ``|``.
"""

from __future__ import annotations

import enum
from pathlib import Path


class FileDataInfo(enum.Enum):
    """Which side of the table a lookup returns."""

    FILE_EXT = "file_ext"
    MIME_TYPE = "mime_type"


class MimeTable:
    """A file extension / MIME type table held in memory."""

    def __init__(self, text: str) -> None:
        self.text = text

    @classmethod
    def from_file(cls, path) -> "MimeTable":
        """Load a table from a text file."""
        return cls(Path(path).read_text(encoding="utf-8"))

    def extensions_for(self, mime_type: str) -> list[str]:
        """Return the extensions listed on the line holding ``mime_type``."""
        return self.lookup(mime_type, FileDataInfo.FILE_EXT)

    def mime_types_for(self, extension: str) -> list[str]:
        """Return the MIME types listed on the line holding ``extension``."""
        return self.lookup(extension, FileDataInfo.MIME_TYPE)

    def lookup(self, near_data: str, info) -> list[str]:
        """Return extensions or MIME types that go with ``near_data``.

        With ``FileDataInfo.FILE_EXT`` ``near_data`` is a MIME type and the
        extensions are returned; with ``FileDataInfo.MIME_TYPE`` it is an
        extension and the MIME types are returned.  An empty list means
        nothing was found.
        """
        info = FileDataInfo(info)
        if not near_data:
            return []
        if info is FileDataInfo.FILE_EXT:
            part = self._extension_part(near_data)
        else:
            part = self._mime_part(near_data)
        if not part:
            return []
        return [piece for piece in part.split("|") if piece]

    def has_extension(self, extension: str) -> bool:
        """Tell whether ``extension`` is a known extension of the table."""
        return self._mime_part(extension) is not None

    def _extension_part(self, mime_type: str) -> str | None:
        text = self.text
        index = text.find(mime_type)
        if index < 0:
            return None
        line_start = text.rfind("\n", 0, index) + 1
        if index == line_start:
            return None
        colon = text.find(":", line_start + 1, index + 1)
        if colon < 0:
            return None
        return text[line_start:colon]

    def _mime_part(self, extension: str) -> str | None:
        if "/" in extension:
            return None
        text = self.text
        index = text.find(extension)
        if index < 0:
            return None
        after = index + len(extension)
        if after >= len(text) or text[after] not in "|:":
            return None
        colon = text.find(":", index)
        if colon < 0:
            return None
        end = text.find("\n", colon + 1)
        if end < 0:
            end = len(text)
        return text[colon + 1:end].rstrip("\r")