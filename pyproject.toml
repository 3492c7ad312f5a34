[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goaltrack"
version = "0.1.0"
description = "A priority-ordered study goal tracker with a menu-driven console, plus a handful of small array and list algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["goals", "study", "priority-queue", "tracker", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
goaltrack = "goaltrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["goaltrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
