[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameball"
version = "0.1.0"
description = "Rigid-body physics and game logic for a rolling-ball simulation"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["physics", "rigid body", "collision", "game", "simulation", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gameball"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
