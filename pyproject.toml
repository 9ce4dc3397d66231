[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starviewer"
version = "0.1.0"
description = "Tycho-2 star catalogue processing, cube-sphere quadtree indexing and star colour computation"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "tycho-2", "stars", "quadtree", "blackbody", "sky"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
starviewer = "starviewer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["starviewer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
