[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankcore"
version = "0.1.0"
description = "Building blocks for a console bank management system: string helpers, digit-string counters, input validators, line-based record files and console prompts."
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "console", "validation", "records", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bankcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
