[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zustlings"
version = "4.7.0"
description = "Small hands-on exercises driven from the terminal, with watch mode, hints and progress tracking"
requires-python = ">=3.11"
keywords = ["exercises", "learning", "tutorial", "education", "watch", "sudoku", "wordle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zustlings = "zustlings.cli:main"
zustlings-sudoku = "zustlings.sudoku:main"
zustlings-wordle = "zustlings.wordle_game:main"

[tool.hatch.build.targets.wheel]
packages = ["zustlings"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
