[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fincenxml"
version = "0.1.0"
description = "Data models, XML reading and writing and validation for FinCEN Form 8300 and Currency Transaction Report activities"
requires-python = ">=3.10"
dependencies = []
keywords = ["fincen", "ctr", "form-8300", "bsa", "xml", "compliance", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fincenxml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
