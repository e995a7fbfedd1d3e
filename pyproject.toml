[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termframe"
version = "0.1.0"
description = "Lay out frames, text and images in a true-colour terminal using ANSI escape sequences"
requires-python = ">=3.10"
keywords = ["terminal", "tui", "ansi", "layout", "true-color"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["termframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
