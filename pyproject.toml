[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgen"
version = "0.1.0"
description = "Generic containers: linked lists, vectors, heaps, indexed heaps, hash sets and maps, and ordered sets and maps driven by comparison functions."
requires-python = ">=3.10"
keywords = ["containers", "data-structures", "heap", "priority-queue", "hash-map", "linked-list", "sorted-set"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["cgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
