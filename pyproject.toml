[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "setkit"
version = "0.1.0"
description = "Integer set containers: a coalesced-chaining hash set and a relation-ordered binary search tree set, each with a cursor iterator."
requires-python = ">=3.10"
dependencies = []
keywords = ["set", "hash table", "coalesced chaining", "binary search tree", "sorted set", "iterator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["setkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
