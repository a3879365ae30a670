[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xcorekit"
version = "0.1.0"
description = "Bounded containers, bit and byte-order helpers, and synchronisation primitives"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "containers",
    "ring-buffer",
    "avl-tree",
    "linked-list",
    "byte-queue",
    "endianness",
    "saturation",
    "mutex",
    "semaphore",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["xcorekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
