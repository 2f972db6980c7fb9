[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chimielab"
version = "0.1.0"
description = "Chemistry helpers for seventh-grade lessons: balancing reactions, concentration and volume problems, element facts and short quizzes with stored grades."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "chemistry",
    "education",
    "stoichiometry",
    "equation balancing",
    "concentration",
    "quiz",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Romanian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chimielab = "chimielab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chimielab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
