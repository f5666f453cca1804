[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rhpman"
version = "0.1.0"
description = "Routing-table neighbour extraction and change-degree tracking for ad hoc networks"
requires-python = ">=3.10"
dependencies = []
keywords = ["manet", "routing", "aodv", "dsdv", "neighbours", "ad-hoc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rhpman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
