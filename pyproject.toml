[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chesswok"
version = "0.1.0"
description = "A two-player chess board with pseudo-legal move generation, castling, en passant and promotion, played in a pygame window."
requires-python = ">=3.10"
keywords = ["chess", "board game", "pygame", "move generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
chesswok = "chesswok.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chesswok"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
