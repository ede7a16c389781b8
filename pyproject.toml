[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kcmutils"
version = "0.1.0"
description = "Helpers for cluster management controllers: registry URL types, release names, labels, owner references and status conditions."
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "cluster-api", "helm", "conditions", "labels", "owner-references"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
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
packages = ["kcmutils"]

[tool.pytest.ini_options]
addopts = "-ra"
