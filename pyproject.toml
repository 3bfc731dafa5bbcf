[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "morsediary"
version = "0.1.0"
description = "A small terminal diary that keeps each entry both as Morse code and as plain text"
requires-python = ">=3.10"
dependencies = []
keywords = ["diary", "morse", "morse-code", "journal", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
diary = "morsediary.diary_app:main"
diary-tools = "morsediary.tools_app:main"

[tool.hatch.build.targets.wheel]
packages = ["morsediary"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
