[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barrierfd"
version = "0.1.0"
description = "Finite-difference pricing of up-and-out barrier call options under a CGMY-type jump model"
requires-python = ">=3.10"
keywords = ["finance", "options", "barrier option", "finite difference", "CGMY", "tridiagonal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
barrierfd = "barrierfd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["barrierfd"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
