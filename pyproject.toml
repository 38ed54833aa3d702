[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dogesh"
version = "3.0.0"
description = "Building blocks of a small Unix shell: line splitting, expansion, aliases, builtins and job control"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "aliases", "job-control", "builtins"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dogesh"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
