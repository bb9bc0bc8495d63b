[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpgforge"
version = "0.1.0"
description = "Role-playing characters and weapons built from a factory, with random rosters and a turn-based duel game"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "role-playing", "game", "factory", "duel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
rpgforge-roster = "rpgforge.roster:main"
rpgforge-duel = "rpgforge.duel:main"

[tool.hatch.build.targets.wheel]
packages = ["rpgforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
