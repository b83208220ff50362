[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sgvm"
version = "0.1.0"
description = "Values, operators, label IR, heap and built-in namespaces for a small scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "intermediate-representation", "garbage-collection", "scripting-language"]
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
packages = ["sgvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
