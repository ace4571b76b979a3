[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yuletide"
version = "0.1.0"
description = "Solvers for a collection of seasonal programming puzzles, usable as a library or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "grids", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yuletide-calories = "yuletide.calories:main"
yuletide-mixing = "yuletide.mixing:main"
yuletide-rps = "yuletide.rps:main"
yuletide-trebuchet = "yuletide.trebuchet:main"
yuletide-galaxies = "yuletide.galaxies:main"
yuletide-mirrors = "yuletide.mirrors:main"
yuletide-pipes = "yuletide.pipes:main"
yuletide-lenses = "yuletide.lenses:main"
yuletide-lagoon = "yuletide.lagoon:main"
yuletide-springs = "yuletide.springs:main"
yuletide-rocks = "yuletide.rocks:main"
yuletide-beams = "yuletide.beams:main"
yuletide-crucible = "yuletide.crucible:main"

[tool.hatch.build.targets.wheel]
packages = ["yuletide"]

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
