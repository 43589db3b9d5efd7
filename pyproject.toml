[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jokerdeck"
version = "0.1.0"
description = "Card, hand-analysis, joker-scoring, tile-map and sprite-animation logic for a poker-roguelike card game"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "cards", "jokers", "roguelike", "game", "scoring", "tilemap", "sprites"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jokerdeck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
