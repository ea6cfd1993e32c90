[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stlkit"
version = "0.1.0"
description = "Generic container data structures: sets, multisets, multimaps, stacks, queues, deques, trees, tries and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "containers",
    "bst",
    "trie",
    "treemap",
    "multiset",
    "multimap",
    "deque",
    "priority-queue",
    "graph",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stlkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
