[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "os2lx"
version = "0.1.0"
description = "Inspect OS/2 LX and NE executables and model the runtime state of an OS/2 compatibility layer"
requires-python = ">=3.10"
dependencies = []
keywords = ["os2", "lx", "ne", "executable", "emulator", "dump"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lx-dump = "os2lx.cli:main"

[tool.setuptools.packages.find]
include = ["os2lx*"]

[tool.pytest.ini_options]
addopts = "-ra"
