[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imkit"
version = "0.1.0"
description = "Object protocol, per-thread error state, logging, option/result types, a string buffer and a linked list"
requires-python = ">=3.10"
dependencies = []
keywords = ["object protocol", "logging", "option", "result", "linked list", "string buffer"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["imkit"]

[tool.pytest.ini_options]
addopts = "-ra"
