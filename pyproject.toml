[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubmap"
version = "0.1.0"
description = "Loader and validator for .cub raycaster maps, with an XPM texture reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["cub", "raycaster", "map", "xpm", "pixmap", "game"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubmap = "cubmap.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cubmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
