[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oathkeep"
version = "0.1.0"
description = "Game rules for a kingdom-building role-playing game: buildings, reputation, status effects and the world clock."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "kingdom", "reputation", "status-effects", "seasons"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oathkeep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
