[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodeck"
version = "0.1.0"
description = "Classic algorithms and data structures: graphs, trees, heaps, hashing and dynamic programming"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graph",
    "shortest-path",
    "minimum-spanning-tree",
    "max-flow",
    "avl",
    "splay-tree",
    "skip-list",
    "binomial-heap",
    "hash-table",
    "knapsack",
    "n-queens",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algodeck-knapsack = "algodeck.knapsack:main"
algodeck-nqueens = "algodeck.nqueens:main"
algodeck-floyd-warshall = "algodeck.floyd_warshall:main"
algodeck-max-flow = "algodeck.max_flow:main"
algodeck-bellman-ford = "algodeck.bellman_ford:main"
algodeck-dijkstra = "algodeck.dijkstra:main"
algodeck-johnson = "algodeck.johnson:main"
algodeck-kruskal = "algodeck.kruskal:main"
algodeck-prims = "algodeck.prims:main"
algodeck-avl = "algodeck.avl:main"
algodeck-hashtable = "algodeck.hashtable:main"
algodeck-binomial-heap = "algodeck.binomial_heap:main"
algodeck-skiplist = "algodeck.skiplist:main"
algodeck-splay = "algodeck.splay:main"

[tool.hatch.build.targets.wheel]
packages = ["algodeck"]

[tool.hatch.build.targets.sdist]
include = ["algodeck", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
