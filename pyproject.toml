[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quayconfig"
version = "0.1.0"
description = "Field-group models and validation helpers for container registry configuration files"
requires-python = ">=3.10"
dependencies = []
keywords = ["configuration", "validation", "registry", "field-groups", "config.yaml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quayconfig"]

[tool.pytest.ini_options]
addopts = "-ra"
