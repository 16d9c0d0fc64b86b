[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictac-neat"
version = "0.1.0"
description = "Tic-tac-toe engine, perfect-play minimax opponent and fitness evaluation for evolving neural-network players"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "minimax", "neuroevolution", "neat", "board-game", "fitness"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tictac-neat = "tictac_neat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tictac_neat"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
