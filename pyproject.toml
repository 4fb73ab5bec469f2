[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studybook"
version = "0.1.0"
description = "Small, tested programming examples: data types, pattern matching, collections, errors, closures, linked lists and threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "examples", "learning", "pattern-matching", "closures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["studybook"]

[tool.hatch.build.targets.sdist]
include = ["studybook", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
