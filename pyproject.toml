[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exprcalc"
version = "0.1.0"
description = "Building blocks for an infix calculator: operator table, depth-aware token evaluation and named variables"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "expression", "evaluator", "math", "trigonometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
packages = ["exprcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
