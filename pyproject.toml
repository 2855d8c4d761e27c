[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bloa"
version = "0.1.0"
description = "Scanner, bytecode chunks, a stack VM and a mark-and-sweep heap for a small scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "bytecode", "virtual machine", "lexer", "scanner", "garbage collector"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["bloa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
