[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "gorana"
version = "0.1.0"
description = "Canvas render command queues and a flexbox-like box layout engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["canvas", "render queue", "layout", "flexbox", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["gorana"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
