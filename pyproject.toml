[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashboggle"
version = "0.1.0"
description = "Base-36 string hashing, an open-addressing hash table with linear and double-hash probing, and a straight-line Boggle word finder"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "hash table", "open addressing", "double hashing", "boggle", "mersenne twister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
str-hash = "hashboggle.strhash:main"
ht-demo = "hashboggle.hashtable:main"
boggle-driver = "hashboggle.boggle:main"

[tool.hatch.build.targets.wheel]
packages = ["hashboggle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
