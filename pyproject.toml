[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ratiounits"
version = "1.0.0"
description = "Physical quantities with exact-ratio unit prefixes, dimension checking and unit conversion"
requires-python = ">=3.10"
dependencies = []
keywords = ["units", "quantities", "dimensions", "physics", "imperial", "conversion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ratiounits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
