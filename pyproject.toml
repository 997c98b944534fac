[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpalgo"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming: segment trees, wavelet matrices, balanced lists, Delaunay triangulation, tree DP and counting."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "segment-tree",
    "wavelet-matrix",
    "delaunay",
    "tree-dp",
    "competitive-programming",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cpalgo"]

[tool.pytest.ini_options]
addopts = "-ra"
