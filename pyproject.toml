[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrapkit"
version = "0.1.0"
description = "Building blocks for a small web scraper: URL decomposition, link extraction, unique file naming and option files"
requires-python = ">=3.10"
dependencies = []
keywords = ["scraper", "url", "mime", "links", "html"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scrapkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
