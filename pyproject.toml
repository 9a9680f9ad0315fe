[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sevenboard"
version = "0.1.0"
description = "Game logic for a networked real-time sevens card game: deck, board rules, events, wire protocol and scenes"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "sevens", "fan tan", "board game", "multiplayer", "udp", "game logic"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sevenboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
