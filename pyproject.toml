[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "0.1.0"
description = "Small computer-architecture exercises: linked lists, a growable vector, matrix loop orderings, cache-blocked transposition, unrolled and lane-wise sums, threaded vector sums and dot products, BMP files and HTTP/1.0 helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked-list",
    "matrix-multiplication",
    "cache-blocking",
    "loop-unrolling",
    "dot-product",
    "bmp",
    "http",
    "education",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-greetings = "labworks.greetings:main"
labworks-matmul = "labworks.matmul:main"
labworks-transpose = "labworks.transpose:main"
labworks-sums = "labworks.sums:main"
labworks-vadd = "labworks.vadd:main"
labworks-dotp = "labworks.dotp:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.hatch.build.targets.sdist]
include = ["labworks", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
