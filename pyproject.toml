[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "potionsgame"
version = "0.1.0"
description = "A small role-playing inventory of potions kept in a backpack file, with costs shown in platinum, gold, silver and bronze coins."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "inventory", "potions", "backpack"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
potionsgame = "potionsgame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["potionsgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
