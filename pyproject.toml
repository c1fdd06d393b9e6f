[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Classic data structures and algorithms: hashing, search trees, heaps, graphs and a binary record file, each with a small console program"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "hash table",
    "binary search tree",
    "avl tree",
    "threaded tree",
    "expression tree",
    "heap",
    "graph",
    "optimal bst",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
dslab-hashing = "dslab.hashing:main"
dslab-dictionary = "dslab.dictionary:main"
dslab-bst = "dslab.bst:main"
dslab-exprtree = "dslab.exprtree:main"
dslab-threaded = "dslab.threaded:main"
dslab-heaps = "dslab.heaps:main"
dslab-landmarks = "dslab.landmarks:main"
dslab-flights = "dslab.flights:main"
dslab-obst = "dslab.obst:main"
dslab-avl = "dslab.avl:main"
dslab-records = "dslab.records:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.pytest.ini_options]
addopts = "-ra"
