[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guardedlock"
version = "0.1.0"
description = "Exclusive and shared mutexes with scoped lockers, plus a thread-safe bank account built on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["mutex", "lock", "rwlock", "shared-mutex", "threading", "concurrency"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
guardedlock-bank = "guardedlock.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["guardedlock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
