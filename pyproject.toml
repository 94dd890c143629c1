[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lendinglib"
version = "1.0.0"
description = "A small library lending manager with book and borrower records, loan queues by priority, file loading and a text menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "lending", "loans", "books", "borrowers", "priority queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lendinglib = "lendinglib.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lendinglib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
