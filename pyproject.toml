[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fateseekers"
version = "0.1.0"
description = "Client-side helpers for the Fate Seekers game: asset loading, localisation, logging, timed text queues and dialog logic"
requires-python = ">=3.10"
keywords = ["game", "assets", "localisation", "subtitles", "notifications"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fateseekers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
