[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "funcarray"
version = "0.1.0"
description = "Keep a fixed-size table of polynomial, power and logarithmic functions and evaluate them from an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["polynomial", "power", "logarithm", "functions", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
funcarray = "funcarray.interface:main"

[tool.hatch.build.targets.wheel]
packages = ["funcarray"]

[tool.pytest.ini_options]
addopts = "-ra"
