[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gopherkit"
version = "0.1.0"
description = "Helpers for Go toolchain installations: system Go detection, version strings, download cache cleanup and path safety checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["go", "golang", "version-manager", "toolchain", "gopher"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gopherkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
