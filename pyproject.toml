[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xstatefulset"
version = "0.1.0"
description = "XStatefulSet resource model, defaulting, apply configurations, listers and an in-memory fake client"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "statefulset", "controller", "lister", "apply-configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xstatefulset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
