[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hdlab"
version = "0.1.0"
description = "Small numerical and programming experiments: finite-difference stencils, Runge-Kutta stages, polyline files, property files and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "finite-differences",
    "runge-kutta",
    "vtp",
    "polyline",
    "experiments",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hdlab-wave = "hdlab.wave:main"
hdlab-properties = "hdlab.properties:main"
hdlab-variadic = "hdlab.variadic:main"
hdlab-dynamic-array = "hdlab.dynamic_array:main"
hdlab-lotto = "hdlab.lotto:main"
hdlab-dice = "hdlab.dice:main"
hdlab-animals = "hdlab.animals:main"

[tool.hatch.build.targets.wheel]
packages = ["hdlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
