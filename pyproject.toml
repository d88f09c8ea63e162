[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "joinapp"
version = "0.1.0"
description = "A small layered WSGI service that greets users joining by name"
requires-python = ">=3.10"
dependencies = []
keywords = ["dependency-injection", "wsgi", "http", "layered-architecture"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
joinapp = "joinapp.app:main"

[tool.hatch.build.targets.wheel]
packages = ["joinapp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
