[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "settlersfmt"
version = "0.1.0"
description = "Building blocks for The Settlers II data files: archives, colours, pixel buffers, mapping files, OEM text and XMIDI to MIDI conversion"
requires-python = ">=3.10"
dependencies = []
keywords = ["settlers", "s2", "xmidi", "midi", "oem", "archive", "game-data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["settlersfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
