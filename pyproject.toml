[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sharekit"
version = "0.1.0"
description = "Reactive shared state with pluggable persistence keys, watch channels and typed mutations"
requires-python = ">=3.10"
dependencies = []
keywords = ["shared state", "reactive", "persistence", "watch", "mutations", "presence"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sharekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
