[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syrial"
version = "0.3.0"
description = "Compact binary serialization over a cursor-based byte stream"
requires-python = ">=3.10"
keywords = ["serialization", "stream", "binary", "codec"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["syrial"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
