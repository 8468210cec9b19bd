[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "walrs"
version = "0.1.0"
description = "Directed graphs, symbol digraphs, depth-first search and a role/resource/privilege access control list."
requires-python = ">=3.10"
dependencies = []
keywords = ["acl", "access-control", "rbac", "digraph", "graph", "dfs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Security",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["walrs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
