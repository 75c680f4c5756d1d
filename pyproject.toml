[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bridgedev"
version = "0.1.0"
description = "Bridged smart-home device models with cluster attribute reads, writes and change reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["home automation", "bridge", "cluster", "attributes", "thermostat", "sensor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bridgedev"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
