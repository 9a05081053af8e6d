[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tokenflow"
version = "0.1.0"
description = "Lexer, token queue and generic type instantiation for an indentation-based compiled language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "compiler", "generics", "type system"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tokenflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
