[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsplabel"
version = "0.1.0"
description = "Build TSPL label printer commands from JSON label descriptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["tspl", "label", "printer", "qrcode", "usb", "vid", "pid"]
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
    "Topic :: Printing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tsplabel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
