[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uinta"
version = "0.1.0"
description = "Engine building blocks: vectors, matrices, smoothing, metrics, a spatial quadtree and bitmap-font text meshing"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "engine", "quadtree", "text-mesh", "font", "vector-math"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uinta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
