[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serpentine"
version = "0.1.0"
description = "A grid-based snake arcade game with speed-boost food, pause and options menus, and a local high-score table."
requires-python = ">=3.10"
keywords = ["snake", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
serpentine = "serpentine.game:main"

[tool.hatch.build.targets.wheel]
packages = ["serpentine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
