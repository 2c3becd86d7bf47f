[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seqmarked"
version = "0.3.1"
description = "Sequence-numbered values with tombstone support for LSM trees and versioned data."
requires-python = ">=3.10"
dependencies = []
keywords = ["lsm", "tombstone", "sequence", "versioning", "mvcc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seqmarked"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
