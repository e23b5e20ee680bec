"""Collect the HTTP and HTTPS URLs referenced by an HTML page."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from .extmime import MimeTable
from .urlhelper import InvalidUrlError, UrlHelper

ALL_URLS_FILE = "all_urls_names.txt"
_MARKERS = ("src=", "href=")
_QUOTES = "\"'"


def _protocol_of(url: str) -> str:
    """Return the URL up to and including its ``http:`` or ``https:`` scheme."""
    for marker in ("http:", "https:"):
        index = url.find(marker)
        if index >= 0:
            return url[:index + len(marker)]
    raise InvalidUrlError(f"no communication protocol in url: {url}")


class UrlSearcher:
    """Finds the URLs of ``src=`` and ``href=`` attributes in a page.

    Relative links are resolved against the root of the page's URL and
    protocol-relative links (``//host/...``) take the page's scheme.
    """

    def __init__(self, url: str, page: str, table: MimeTable) -> None:
        helper = UrlHelper(url, table)
        self.url = url
        self.page = page
        self.protocol = _protocol_of(url)
        self.root_path = helper.url_with_root_path()

    @classmethod
    def from_file(cls, url: str, file_path, table: MimeTable) -> "UrlSearcher":
        """Build a searcher over the page stored in ``file_path``."""
        page = Path(file_path).read_bytes().decode("utf-8", errors="replace")
        return cls(url, page, table)

    def find_urls(self, content_type: str) -> list[str]:
        """Return the unique URLs of the page, ``src`` links first.

        Only ``text/html`` pages are searched; any other content type
        gives an empty list.
        """
        if content_type != "text/html":
            return []
        content = ""
        found: list[str] = []
        for marker in _MARKERS:
            for url in self._scan(marker):
                line = url + "\n"
                if line not in content:
                    content += line
                    found.append(url)
        return found

    def _scan(self, marker: str) -> Iterator[str]:
        page = self.page
        length = len(page)
        position = 0
        while position < length:
            index = page.find(marker, position)
            if index < 0:
                return
            after = index + len(marker)
            url_length = 0
            if after < length and page[after] in _QUOTES:
                quote = page[after]
                end = page.find(quote, after + 1)
                if end >= 0:
                    url_length = end - (after + 1)
                    url = self._resolve(page[after + 1:end])
                    if url is not None:
                        yield url
            if url_length == 0:
                position = after + len(marker)
            else:
                position = after + url_length + 2

    def _resolve(self, raw: str) -> str | None:
        if raw.startswith("//"):
            return self.protocol + raw
        if raw.startswith(("https://", "http://")):
            return raw
        if raw.startswith("/"):
            return self.root_path + raw[1:]
        if ":" in raw:
            return None
        return self.root_path + raw


def save_urls(content: str, dir_path) -> None:
    """Append newline-separated URLs to ``all_urls_names.txt`` in ``dir_path``.

    Nothing is written, and no directory is made, when ``content`` holds
    at most one character.
    """
    if not content or len(content) <= 1:
        return
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)
    target = Path(dir_path) / ALL_URLS_FILE
    with open(target, "a", encoding="utf-8", newline="") as handle:
        handle.write(content)


def get_all_urls_in_page(url: str, content_type: str, file_path, dir_path, table: MimeTable) -> list[str]:
    """Return the unique URLs of the page in ``file_path`` and record them in ``dir_path``."""
    searcher = UrlSearcher.from_file(url, file_path, table)
    urls = searcher.find_urls(content_type)
    save_urls("".join(found + "\n" for found in urls), dir_path)
    return urls