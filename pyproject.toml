[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linsolve"
version = "0.1.0"
description = "Dense vectors, matrices and linear system solvers with a least-squares regression tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "gaussian elimination", "conjugate gradient", "regression", "matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linsolve-regression = "linsolve.regression:main"

[tool.hatch.build.targets.wheel]
packages = ["linsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
