[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "piscript"
version = "0.1.0"
description = "Runtime values and a library of built-in functions for the PiScript scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "piscript",
    "interpreter",
    "scripting",
    "builtins",
    "runtime",
]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["piscript"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
