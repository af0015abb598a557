[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "pypipex"
version = "1.0.0"
description = "Run two commands joined by a pipe between an input file and an output file, the way a shell does with '< infile cmd1 | cmd2 > outfile'."
requires-python = ">=3.10"
dependencies = []
keywords = ["pipe", "shell", "redirection", "subprocess", "PATH"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pypipex = "pypipex.runner:main"

[tool.setuptools.packages.find]
include = ["pypipex*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
