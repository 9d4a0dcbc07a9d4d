[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lptsched"
version = "0.1.0"
description = "Tick-based Longest-Processing-Time scheduling simulator for spreading autonomous-car modules across GPUs"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "lpt", "simulation", "gpu", "autonomous-vehicles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lptsched = "lptsched.cli:main"
lptsched-gui = "lptsched.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["lptsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
