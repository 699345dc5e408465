[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "penplot"
version = "0.1.0"
description = "Build pen-plotter drawings from lines and shapes, trim them, optimise the pen path and write G-code."
requires-python = ">=3.10"
dependencies = []
keywords = ["plotter", "g-code", "gcode", "pen plotter", "vector", "clipping", "generative art"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["penplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
