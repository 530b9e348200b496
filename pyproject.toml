[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boggleht"
version = "0.1.0"
description = "Straight-line word search on seeded letter boards, a base-36 string hash, and an open-addressing hash table"
requires-python = ">=3.10"
dependencies = []
keywords = ["boggle", "word search", "hash table", "double hashing", "string hash", "mersenne twister"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boggle-driver = "boggleht.boggle:main"
str-hash = "boggleht.strhash:main"
ht-demo = "boggleht.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["boggleht"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
