[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autogensummary"
version = "0.1.10"
description = "Generate an mdBook SUMMARY.md from a source directory, as a preprocessor or from the command line."
requires-python = ">=3.10"
dependencies = []
keywords = ["mdbook", "markdown", "summary", "preprocessor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
autogensummary = "autogensummary.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["autogensummary"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
