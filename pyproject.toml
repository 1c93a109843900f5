[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reactui"
version = "0.1.0"
description = "Signal-driven UI components built through pluggable renderers, with a websocket renderer for Aseprite dialogs"
requires-python = ">=3.10"
keywords = ["signals", "reactive", "ui", "renderer", "websocket", "aseprite"]
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
    "Topic :: Software Development :: User Interfaces",
]
dependencies = [
    "websockets",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["reactui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
