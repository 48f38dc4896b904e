[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytetrie"
version = "1.2.0"
description = "A trie mapping text and byte-string keys to values"
requires-python = ">=3.10"
dependencies = []
keywords = ["trie", "prefix tree", "mapping", "data structure", "bytes"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bytetrie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
