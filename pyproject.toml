[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minidatalog"
version = "0.1.0"
description = "A small Datalog engine with naive and semi-naive bottom-up evaluation"
requires-python = ">=3.10"
dependencies = []
keywords = ["datalog", "logic programming", "deductive database", "fixpoint", "semi-naive"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minidatalog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
