[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guidedweapons"
version = "0.1.0"
description = "HTTP service that loads guided weapon statistics from a CSV table into MongoDB and serves them as JSON"
requires-python = ">=3.10"
keywords = ["http", "json", "mongodb", "csv", "weapons", "statistics"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Database",
]
dependencies = [
    "pyyaml",
    "pymongo",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
guidedweapons = "guidedweapons.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["guidedweapons"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
