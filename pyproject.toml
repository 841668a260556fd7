[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolvlib"
version = "0.1.0"
description = "Small utility toolkit: string helpers, scope guards, thread pool, CRC, interval tree, buffered reader, file and socket helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "crc", "interval-tree", "thread-pool", "sockets", "buffered-reader", "scope-guard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wolvlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
