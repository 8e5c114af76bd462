[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "luna"
version = "0.1.0"
description = "Building blocks for an interactive shell: rich-text markup, prompt rendering, syntax highlighting, configuration and command correction"
requires-python = ">=3.11"
keywords = ["shell", "terminal", "ansi", "prompt", "markup", "highlighting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Terminals",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["luna"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
