[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacefighter"
version = "0.1.0"
description = "The 2D engine core of a space shooter: vectors, regions, collision and trigger flags, input state, textures, sprite batching, screen management and a high-score file."
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "2d", "sprites", "engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spacefighter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
