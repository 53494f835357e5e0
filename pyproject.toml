[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vasutjegy"
version = "1.0.0"
description = "Console railway ticket booking system: trains, cars, seats and tickets kept in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["railway", "tickets", "booking", "reservation", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Hungarian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vasutjegy = "vasutjegy.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["vasutjegy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
