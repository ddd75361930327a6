[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursebench"
version = "0.1.0"
description = "Coursework exercises: integer and floating-point bit patterns, stacks and queues, and a 24-bit BMP processor"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "twos-complement",
    "booth",
    "ieee-754",
    "stack",
    "queue",
    "bitmap",
    "bmp",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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
coursebench-binary = "coursebench.binary:main"
coursebench-twos = "coursebench.twos_complement:main"
coursebench-float-dump = "coursebench.floats:main_dump"
coursebench-float-force = "coursebench.floats:main_force"
coursebench-float-special = "coursebench.floats:main_special"
coursebench-float-experiments = "coursebench.float_experiments:main"
coursebench-menu = "coursebench.menu:main"
coursebench-metrics = "coursebench.metrics:main"
coursebench-bmp = "coursebench.bmp_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coursebench"]

[tool.pytest.ini_options]
addopts = "-ra"
