[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchlab"
version = "0.1.0"
description = "Classic search, graph, puzzle and sorting algorithms with small interactive command-line front ends."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "a-star",
    "8-puzzle",
    "n-queens",
    "backtracking",
    "bfs",
    "dfs",
    "dijkstra",
    "prim",
    "minimum-spanning-tree",
    "selection-sort",
    "chatbot",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchlab-puzzle = "searchlab.puzzle:main"
searchlab-nqueens = "searchlab.nqueens:main"
searchlab-bfs = "searchlab.traversal:main_bfs"
searchlab-dfs = "searchlab.traversal:main_dfs"
searchlab-chatbot = "searchlab.chatbot:main"
searchlab-dijkstra = "searchlab.shortest_path:main"
searchlab-prim = "searchlab.mst:main"
searchlab-sort = "searchlab.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["searchlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
