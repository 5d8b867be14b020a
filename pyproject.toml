[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Small, readable implementations of classic data structures and algorithms, each with an interactive command"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "sorting",
    "queue",
    "deque",
    "binary search tree",
    "hash table",
    "polynomial",
    "sparse matrix",
    "postfix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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

[project.scripts]
dsakit-polynomial = "dsakit.polynomial:main"
dsakit-sparse = "dsakit.sparse:main"
dsakit-infix = "dsakit.infix:main"
dsakit-expression-tree = "dsakit.expression_tree:main"
dsakit-sort = "dsakit.sorting:main"
dsakit-search = "dsakit.search:main"
dsakit-bfs = "dsakit.graph:main"
dsakit-queue = "dsakit.queues:main"
dsakit-browser = "dsakit.browser:main"
dsakit-bst = "dsakit.bst:main"
dsakit-hash = "dsakit.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
