[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runetasks"
version = "0.1.0"
description = "Front matter helpers for markdown task lists: metadata flag parsing and merging"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "markdown", "front-matter", "metadata", "todo"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["runetasks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
