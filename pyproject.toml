[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glasstty"
version = "0.1.0"
description = "Building blocks for emulating early glass teletypes: phosphor glow, keyboard mapping, a pty host, command-line options and character ROMs"
requires-python = ">=3.10"
keywords = ["terminal", "emulator", "vt52", "vt05", "pty", "character-rom", "retrocomputing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glasstty"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
