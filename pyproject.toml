[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "richman"
version = "0.1.0"
description = "A terminal board game of buying, upgrading and collecting fines on properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "board-game", "terminal", "hot-seat", "richman"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
richman = "richman.game:main"

[tool.hatch.build.targets.wheel]
packages = ["richman"]

[tool.pytest.ini_options]
addopts = "-ra"
