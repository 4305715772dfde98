[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyperdbg-client"
version = "0.1.0"
description = "HTTP client for a HyperDbg debugger server, with parsing of its plain-text replies and hex JSON helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["debugger", "hypervisor", "hyperdbg", "http", "client", "hex"]
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
    "Topic :: Software Development :: Debuggers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hyperdbg_client"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
