[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrix4calc"
version = "1.0.0"
description = "4x4 matrix arithmetic with a calculator that reads two matrices and a scalar from an input file"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "determinant", "inverse", "transpose", "4x4"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matrix4calc = "matrix4calc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["matrix4calc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
