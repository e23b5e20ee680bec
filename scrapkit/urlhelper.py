"""Split an HTTP(S) URL into domain, directory path and file name."""

from __future__ import annotations

import warnings

from .extmime import MimeTable

_SCHEMES = ("https://", "http://")


class InvalidUrlError(ValueError):
    """Raised when a URL has no usable scheme or domain name."""


def _find_domain_name(url: str) -> str:
    for scheme in _SCHEMES:
        index = url.find(scheme)
        if index >= 0:
            rest = url[index + len(scheme):]
            domain = rest.split("/", 1)[0]
            if "." not in domain:
                raise InvalidUrlError(f"problem with the domain name of url: {url}")
            return domain
    raise InvalidUrlError(f"problem with the domain name of url: {url}")


class UrlHelper:
    """Parts of a URL: domain name, absolute path, file name and extension.

    ``abs_path`` always starts and ends with ``/``; when the URL names a
    file with a known extension, that file is split off into
    ``file_name`` and ``file_ext``.
    """

    def __init__(self, url: str, table: MimeTable) -> None:
        self.url = url
        self._table = table
        self.domain_name = _find_domain_name(url)
        self.file_name: str | None = None
        self.file_ext: str | None = None
        self.abs_path = self._find_abs_path()
        self._split_file_name()

    def _domain_end(self) -> int:
        return self.url.find(self.domain_name) + len(self.domain_name)

    def _find_abs_path(self) -> str:
        rest = self.url[self._domain_end():]
        if "/" in rest and len(rest) > 1:
            path = rest[rest.index("/"):]
            return path.split("?", 1)[0]
        return "/"

    def _split_file_name(self) -> None:
        path = self.abs_path
        if len(path) <= 1:
            return
        dot = path.rfind(".")
        if dot >= 0:
            ext = path[dot:]
            if len(ext) > 1 and self._table.has_extension(ext):
                slash = path.rfind("/")
                self.file_name = path[slash + 1:]
                self.file_ext = ext
                self.abs_path = path[:slash + 1]
                return
        if not path.endswith("/"):
            self.abs_path = path + "/"

    def set_default_file_name(self, name: str, mime_type: str) -> bool:
        """Give a file name to a URL that has none, with an extension for ``mime_type``.

        Returns True when the extension was added.  Returns False, with a
        warning, when the URL already has a file name or the MIME type is
        not in the table.
        """
        if self.file_name is not None:
            warnings.warn(
                f"the file name is already set: {self.file_name}", stacklevel=2
            )
            return False
        self.file_name = name
        return self.add_extension(mime_type)

    def add_extension(self, mime_type: str) -> bool:
        """Append the extension for ``mime_type`` to the file name if it has none.

        Raises ValueError when there is no file name.  Returns False, with
        a warning, when the MIME type is not in the table.
        """
        if self.file_name is None:
            raise ValueError(
                f"no file name, cannot set a file extension for url: {self.url}"
            )
        if self.file_ext is None:
            extensions = self._table.extensions_for(mime_type)
            if not extensions:
                warnings.warn(f"mime {mime_type} is not in list", stacklevel=2)
                return False
            self.file_ext = extensions[-1]
            self.file_name += self.file_ext
        return True

    def url_with_abs_path(self) -> str:
        """Return the URL up to and including its directory path."""
        return self.url[:self._domain_end()] + self.abs_path

    def url_with_root_path(self) -> str:
        """Return the URL up to the domain name, followed by ``/``."""
        return self.url[:self._domain_end()] + "/"