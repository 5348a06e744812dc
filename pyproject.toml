[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diskscape"
version = "0.11.0"
description = "Disk usage model and squarified treemap layout for visual disk space navigation"
requires-python = ">=3.10"
dependencies = []
keywords = ["disk", "disk-usage", "treemap", "filesystem", "du"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["diskscape"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
