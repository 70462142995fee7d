[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "promptparts"
version = "0.1.0"
description = "Building blocks for shell prompts: version detection, repository state, clocks and system details"
requires-python = ">=3.11"
keywords = ["prompt", "shell", "git", "kubernetes", "version"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = [
    "pyyaml",
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["promptparts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
