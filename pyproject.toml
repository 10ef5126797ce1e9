[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictactoe"
version = "1.0.0"
description = "A two-player Tic Tac Toe game in one window, with a start menu and turn overlays."
requires-python = ">=3.10"
keywords = ["tictactoe", "game", "board-game", "pygame", "two-player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tictactoe = "tictactoe.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tictactoe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
