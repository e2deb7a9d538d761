[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easysolve"
version = "0.1.0"
description = "Small solutions to classic introductory programming puzzles, with a command-line front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "algorithms", "exercises", "competitive-programming", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
easysolve = "easysolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["easysolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
