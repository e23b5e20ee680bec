"""Building blocks for a small web scraper: MIME lookup, URL parts, link collection, unique names and option files."""

__version__ = "0.1.0"

__all__ = ["extmime", "urlhelper", "urlsearcher", "names", "optfile"]