[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "wordcpu"
version = "0.1.0"
description = "A tiny 16-bit CPU emulator with 64 KiB little-endian memory"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "cpu", "16-bit", "virtual machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordcpu-demo = "wordcpu.demo:main"
wordcpu-memtest = "wordcpu.memtest:main"

[tool.setuptools.packages.find]
include = ["wordcpu*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
