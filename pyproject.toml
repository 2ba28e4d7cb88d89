[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lokit"
version = "0.1.0"
description = "Helpers for collections, mappings, conditions, errors, channels and concurrency"
requires-python = ">=3.10"
keywords = ["collections", "functional", "utilities", "channels", "helpers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
