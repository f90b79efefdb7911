[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aokami"
version = "0.1.0"
description = "Download game server jars, run the bundled data generator and condense its output into compact JSON"
requires-python = ">=3.10"
keywords = ["minecraft", "server", "data-generator", "registries", "blocks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
aokami = "aokami.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aokami"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
