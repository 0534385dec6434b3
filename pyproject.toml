[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vsupdater"
version = "0.1.0"
description = "Command-line updater for Vintage Story server and client installations"
requires-python = ">=3.10"
keywords = ["vintage-story", "updater", "game-server", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vsupdater = "vsupdater.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vsupdater"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
