[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dronesim"
version = "0.1.0"
description = "A package-delivery simulation with drones, robots, path strategies and battery recharging"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "drone", "delivery", "robot", "path-planning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["dronesim"]

[tool.pytest.ini_options]
addopts = "-ra"
