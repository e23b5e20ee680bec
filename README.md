# scrapkit

Building blocks for a small web scraper. The package uses only the
standard library.

- `scrapkit.extmime` looks up file extensions by MIME type, and MIME types
  by extension, in a plain-text table (`MimeTable`, `FileDataInfo`).
- `scrapkit.urlhelper` splits a URL into domain name, absolute path, file
  name and file extension (`UrlHelper`, `InvalidUrlError`).
- `scrapkit.urlsearcher` collects the unique `src=` and `href=` links of an
  HTML page as absolute URLs (`UrlSearcher`, `get_all_urls_in_page`,
  `save_urls`).
- `scrapkit.names` hands out unique file names such as `index_scrap_0` and
  `index_scrap_1`, and records them in a names file (`available_file_name`,
  `add_name_if_missing`, `delete_names_manager`).
- `scrapkit.optfile` reads and writes `{name -> value}` option files
  (`get_option_value`, `get_all_option_values`, `get_array_option_values`,
  `OptionWriter`).

## Installing

```
pip install .
```

## The MIME table

Each line of the table maps extensions to MIME types. Extensions come
before the colon and MIME types after it. Each list is separated by `|`:

```
.html|.htm:text/html
.js:text/javascript|application/javascript
```

```python
from scrapkit.extmime import FileDataInfo, MimeTable

table = MimeTable.from_file("mime_table.txt")
table.extensions_for("text/html")               # ['.html', '.htm']
table.mime_types_for(".js")                     # ['text/javascript', 'application/javascript']
table.lookup("text/html", FileDataInfo.FILE_EXT) # ['.html', '.htm']
table.has_extension(".js")                      # True
```

A lookup that finds nothing returns an empty list.

## Taking a URL apart

```python
from scrapkit.urlhelper import UrlHelper

helper = UrlHelper("https://www.example.com/tags/page.html?x=1", table)
helper.domain_name           # 'www.example.com'
helper.abs_path              # '/tags/'
helper.file_name             # 'page.html'
helper.file_ext              # '.html'
helper.url_with_abs_path()   # 'https://www.example.com/tags/'
helper.url_with_root_path()  # 'https://www.example.com/'
```

`abs_path` always starts and ends with `/`. The query string is dropped.
A file name is split off only when its extension is in the table.

`InvalidUrlError` (a `ValueError`) is raised in two cases:

- the URL has no `http://` or `https://`;
- the domain has no dot.

If a URL names no file, `set_default_file_name(name, mime_type)` gives it
one. It uses the last extension the table lists for the MIME type:

```python
helper = UrlHelper("http://www.example.com/", table)
helper.set_default_file_name("index_0", "text/html")  # True
helper.file_name                                      # 'index_0.htm'
```

In the following cases the method returns `False` and issues a warning:

- the URL already has a file name;
- the MIME type is not in the table.

`add_extension(mime_type)` raises `ValueError` when there is no file name.

## Collecting links

```python
from scrapkit.urlsearcher import UrlSearcher, get_all_urls_in_page

searcher = UrlSearcher("https://www.example.com/", page_html, table)
searcher.find_urls("text/html")
```

`find_urls` returns a list with no duplicates. The `src=` links come first,
then the `href=` links. Links are resolved as follows:

- a relative link is joined to the root of the page's URL;
- a protocol-relative link (`//host/...`) takes the page's scheme;
- a link with any other scheme, such as `mailto:`, is skipped.

Any content type other than `text/html` gives an empty list.

`get_all_urls_in_page(url, content_type, file_path, dir_path, table)` reads
the page from `file_path` and returns its links. It also appends them,
one per line, to `all_urls_names.txt` in `dir_path`.

## Unique file names

```python
from scrapkit.names import add_name_if_missing, available_file_name

available_file_name("all_files_names.txt", "out", "index", "_scrap_")  # 'index_scrap_0'
available_file_name("all_files_names.txt", "out", "index", "_scrap_")  # 'index_scrap_1'

add_name_if_missing("out", "urls.txt", "https://www.example.com/")  # True
add_name_if_missing("out", "urls.txt", "https://www.example.com/")  # False
```

The directory is created if it is missing. An empty directory path means
the current directory. An empty manager name raises `ValueError`.

`delete_names_manager(dir_path, manager)` removes the file
`dir_path + manager`. Note that the two are joined as given, so
`dir_path` should end with a separator. It returns whether a file was
removed.

## Option files

```python
from scrapkit.optfile import (
    OptionWriter,
    get_all_option_values,
    get_array_option_values,
    get_option_value,
)

with OptionWriter("config.txt", "=") as writer:
    writer.write_option("name", "my session")
    writer.write_array("versioning", ["on"])

get_option_value("config.txt", "name")              # 'my session'
get_array_option_values("config.txt", "versioning") # ['on']
```

`OptionWriter` appends to the file, beginning with the header line.
Closing the writer adds an empty line.

`get_all_option_values` returns every value of a repeated option, in order.

`get_array_option_values` returns the runs of ASCII letters and digits
found between the option's parentheses.

## What it does not do

scrapkit does not download anything. You fetch pages yourself and hand
them in as strings or files. The package also has no command-line
program and no crawl loop: it provides only the pieces listed above.

## Running the tests

```
pip install ".[test]"
pytest
```