[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wdtools"
version = "0.14.6"
description = "Small toolkit: encodings, hashing, UUIDs, byte-prefix maps, async channels, locks, pools and an HTTP request helper"
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["asyncio", "channel", "trie", "pool", "lock", "lru", "base64", "uuid", "toolkit"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[tool.hatch.build.targets.wheel]
packages = ["wdtools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
