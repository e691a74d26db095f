[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snobkit"
version = "0.1.0"
description = "Integer partitions, Young tableaux, permutations and Fourier transforms on finite groups"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "integer partition",
    "young tableau",
    "permutation",
    "representation theory",
    "fourier transform",
    "finite groups",
    "dihedral group",
    "cyclic group",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["snobkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
