[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sio"
version = "0.1.0"
description = "Runtime values, native-function environments and latency-based link routing for the sio language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "runtime", "environment", "routing", "values"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sio-router = "sio.router:main"

[tool.hatch.build.targets.wheel]
packages = ["sio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
