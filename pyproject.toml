[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilearcade"
version = "0.1.0"
description = "A tile menu of small game scenes with fade transitions, drawn with pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "menu", "launcher", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilearcade = "tilearcade.window:main"

[tool.hatch.build.targets.wheel]
packages = ["tilearcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
