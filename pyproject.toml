[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compilerlab"
version = "0.1.0"
description = "Small compiler-construction tools: a lexer, FIRST/FOLLOW sets, recursive-descent and shift-reduce parsing, and three-address code generation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "lexer",
    "parser",
    "grammar",
    "first-follow",
    "shift-reduce",
    "recursive-descent",
    "intermediate-code",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compilerlab-intermediate = "compilerlab.intermediate:main"
compilerlab-validate = "compilerlab.recursive_descent:main"
compilerlab-first-follow = "compilerlab.first_follow:main"
compilerlab-lex = "compilerlab.lexer:main"
compilerlab-shift-reduce = "compilerlab.shift_reduce:main"

[tool.hatch.build.targets.wheel]
packages = ["compilerlab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
