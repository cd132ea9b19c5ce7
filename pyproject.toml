[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plaquette"
version = "0.1.0"
description = "Signal-shaping helpers for interactive media: value mapping, wrapping, fast trigonometry, easing curves, wave shapes, random numbers and small list containers."
requires-python = ">=3.10"
dependencies = []
keywords = ["easing", "oscillator", "waveform", "mapping", "interactive", "signal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plaquette"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
