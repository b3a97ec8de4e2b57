[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "variantmod"
version = "0.1.0"
description = "Building blocks for dependency-aware file provisioning: JSON Patch, regexp replacement, value merging and module manager settings."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "json-patch",
    "regexp",
    "provisioning",
    "dependencies",
    "build",
]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["variantmod"]

[tool.hatch.build.targets.sdist]
include = [
    "variantmod",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
