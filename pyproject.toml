[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shelfspace"
version = "0.1.0"
description = "Personal book shelf: browse a SQLite book catalogue, keep favourites, reviews and notes"
requires-python = ">=3.10"
dependencies = []
keywords = ["books", "library", "favorites", "notes", "reviews", "sqlite"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shelfspace = "shelfspace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shelfspace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
