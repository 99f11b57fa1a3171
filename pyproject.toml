[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slgkit"
version = "0.1.0"
description = "Static game configuration loaders, session tokens and small helpers for a strategy game server"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["game", "strategy", "slg", "configuration", "session"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["slgkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
