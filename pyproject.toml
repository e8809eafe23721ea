[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdrills"
version = "0.1.0"
description = "Small drills on stacks, arrays, grids, operator priority and recursion, with console programs."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "stack", "arrays", "grids", "recursion", "teaching", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsdrills-stack = "dsdrills.stack_menu:main"
dsdrills-priority = "dsdrills.priority:main"
dsdrills-arrays = "dsdrills.arrays:main"
dsdrills-grids = "dsdrills.grids:main"
dsdrills-env = "dsdrills.environment:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdrills"]

[tool.hatch.build.targets.sdist]
include = ["dsdrills", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
