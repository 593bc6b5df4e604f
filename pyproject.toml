[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pedrolib"
version = "0.1.0"
description = "Small helpers for characters, numbers, byte buffers, strings, linked lists, formatted output and chunked line reading"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "buffers", "linked-list", "printf", "line-reader"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pedrolib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
